import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))
    assert is_alnum(code) == chr(code).isalnum()


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_str_isprintable(code):
    assert is_print(code) == chr(code).isprintable()


@given(st.integers(min_value=-1000, max_value=100000))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code <= 127)


@given(st.integers(min_value=128, max_value=0x10FFFF))
def test_non_ascii_codes_are_never_classified(code):
    assert not is_alpha(code)
    assert not is_digit(code)
    assert not is_alnum(code)
    assert not is_print(code)
    assert not is_ascii(code)


def test_non_ascii_letter_is_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("é")


@pytest.mark.parametrize("code", ASCII_CODES)
def test_to_upper_matches_str_upper(code):
    assert to_upper(code) == ord(chr(code).upper())


@pytest.mark.parametrize("code", ASCII_CODES)
def test_to_lower_matches_str_lower(code):
    assert to_lower(code) == ord(chr(code).lower())


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_case_round_trip_on_strings(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_case_conversion_keeps_argument_kind():
    assert to_upper("q") == "q".upper()
    assert to_lower(ord("Q")) == ord("q")


@given(st.integers(min_value=128, max_value=0x10FFFF))
def test_case_conversion_leaves_non_ascii_unchanged(code):
    assert to_upper(code) == code
    assert to_lower(code) == code


def test_sharp_s_is_left_alone():
    assert to_upper("ß") == "ß"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_multi_character_string_rejected(bad):
    with pytest.raises(ValueError):
        is_alpha(bad)
    with pytest.raises(ValueError):
        to_upper(bad)


@pytest.mark.parametrize("bad", [1.5, None, b"a", True])
def test_wrong_type_rejected(bad):
    with pytest.raises(TypeError):
        is_digit(bad)
    with pytest.raises(TypeError):
        to_lower(bad)