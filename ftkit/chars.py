"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string. Classification functions return ``bool``. The case converters
return a value of the same kind as their argument. Only ASCII letters are
affected; every other value is returned unchanged.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code for *c*, validating its type."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: int | str) -> bool:
    """Return True if *c* is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: int | str) -> bool:
    """Return True if *c* is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Return True if *c* is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True if *c* lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True if *c* is a printable ASCII character (space through '~')."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Convert an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if not _is_lower(code):
        return c
    upper = code - _CASE_OFFSET
    return chr(upper) if isinstance(c, str) else upper


def to_lower(c: CharLike) -> CharLike:
    """Convert an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if not _is_upper(code):
        return c
    lower = code + _CASE_OFFSET
    return chr(lower) if isinstance(c, str) else lower