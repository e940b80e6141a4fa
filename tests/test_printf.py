import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.printf import FormatError, format_arg, printf, render


def test_char_nul_counts():
    text = render("%c test", 0)
    assert text == "\x00 test"
    assert len(text) == len(" test") + 1


def test_null_string():
    assert render("%s", None) == "(null)"


def test_null_pointer():
    assert render("%p", None) == "(nil)"
    assert render("%p", 0) == "(nil)"


def test_pointer_prefix_and_value():
    text = render("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_decimal_and_integer():
    assert render("%d", 42) == "42"
    assert render("%i", 100) == "100"


def test_unsigned():
    assert render("%u", 52) == "52"


def test_unsigned_wraps_negative():
    assert int(render("%u", -1)) == 2**32 - 1


def test_percent_consumes_no_argument():
    assert render("%%%d", 7) == "%7"


def test_mixed_example():
    assert render("H%cllo%s%x%s!", "e", " ", 0x42, "tokyo") == "Hello 42tokyo!"


def test_int_min_minus_one_wraps():
    assert int(render("%d", -(2**31) - 1)) == 2**31 - 1


def test_int_min():
    assert render("%d", -2147483648) == "-2147483648"


def test_hex_zero():
    assert render("%x", 0) == "0"


def test_unknown_conversion():
    with pytest.raises(FormatError):
        render("%q", 1)


def test_trailing_percent():
    with pytest.raises(FormatError):
        render("abc%")


def test_missing_argument():
    with pytest.raises(FormatError):
        render("%d %d", 1)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        format_arg("z", 1)


def test_wrong_type_for_string():
    with pytest.raises(TypeError):
        render("%s", 5)


def test_wrong_type_for_int():
    with pytest.raises(TypeError):
        render("%d", "5")


def test_format_arg_percent_ignores_argument():
    assert format_arg("%", object()) == "%"


def test_printf_writes_and_counts(capsys):
    count = printf("%d", 42)
    assert capsys.readouterr().out == "42"
    assert count == 2


def test_printf_raises_on_bad_format(capsys):
    with pytest.raises(FormatError):
        printf("%y")
    assert capsys.readouterr().out == ""


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_signed_round_trip(n):
    assert int(render("%d", n)) == n
    assert render("%i", n) == render("%d", n)


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_round_trip(n):
    lower = render("%x", n)
    assert int(lower, 16) == n
    assert render("%X", n) == lower.upper()
    assert int(render("%u", n)) == n


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_round_trip(n):
    assert int(render("%p", n)[2:], 16) == n


@given(st.text(alphabet=st.characters(blacklist_characters="%")))
def test_plain_text_unchanged(text):
    assert render(text) == text


@given(st.text(alphabet=st.characters(blacklist_characters="%"), max_size=30))
def test_printf_count_matches_render(text):
    assert printf("%s", text) == len(render("%s", text))