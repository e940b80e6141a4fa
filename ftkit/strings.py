"""String utilities with the semantics of the classic C string routines.

Text functions work on ``str``. The end of a string stands where a C
terminator would be, so searching for ``"\\0"`` finds ``len(s)``. Positions
come back as indices, and "not found" comes back as ``None``.
:func:`strlcpy` and :func:`strlcat` work on byte buffers that hold
NUL-terminated strings. Sizes and counts that would be unsigned in C raise
``ValueError`` when negative.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any

from ftkit.chars import is_digit

__all__ = [
    "atoi",
    "itoa",
    "strlen",
    "strchr",
    "strrchr",
    "strnstr",
    "strncmp",
    "strdup",
    "substr",
    "strjoin",
    "split",
    "strtrim",
    "strmapi",
    "striteri",
    "strlcpy",
    "strlcat",
]

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_WHITESPACE = " \t\n\v\f\r"


def _to_int32(value: int) -> int:
    """Wrap *value* into the signed 32-bit range, as a C ``int`` cast does."""
    return (value + 2**31) % 2**32 - 2**31


def _as_char(c: int | str) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace and one sign are skipped, then digits are read
    until the first non-digit. Input without digits yields 0. The result
    wraps to a 32-bit ``int``. A value that would overflow a 64-bit long
    gives the long limit cast to ``int``: -1 when positive, 0 when negative.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] == "-":
        sign = -1
        text = text[1:]
    elif text[:1] == "+":
        text = text[1:]
    result = 0
    for ch in text:
        if not is_digit(ch):
            break
        digit = ord(ch) - ord("0")
        if result > (_LONG_MAX - digit) // 10:
            return _to_int32(_LONG_MAX if sign == 1 else _LONG_MIN)
        result = result * 10 + digit
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of the integer *n*."""
    if isinstance(n, bool):
        raise TypeError("expected an int, got bool")
    return str(operator.index(n))


def strlen(s: str) -> int:
    """Return the number of characters in *s*."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first *c* in *s*.

    Searching for NUL finds the terminator at ``len(s)``. Returns None if
    *c* does not occur.
    """
    ch = _as_char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last *c* in *s*.

    Searching for NUL finds the terminator at ``len(s)``. Returns None if
    *c* does not occur.
    """
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find *little* lying wholly within the first *length* characters of *big*.

    An empty *little* matches at index 0. Returns None if there is no match.
    """
    length = _non_negative("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns the difference between the first pair of differing code
    points, or 0. A string that ends early compares as if followed by NUL.
    """
    n = _non_negative("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return up to *length* characters of *s* from index *start*.

    A *start* at or past the end gives an empty string.
    """
    start = _non_negative("start", start)
    length = _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be str")
    return s1 + s2


def split(s: str, c: int | str) -> list[str]:
    """Split *s* on the delimiter *c*, dropping empty words."""
    return [word for word in s.split(_as_char(c)) if word]


def strtrim(s1: str, charset: str) -> str:
    """Strip every character in *charset* from both ends of *s1*."""
    if not isinstance(s1, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be str")
    return s1.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` for every item of the mutable sequence *s*.

    When *f* returns something other than None, it replaces the item in place.
    """
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement


def _c_length(buf: bytes | bytearray | memoryview) -> int:
    """Length of the NUL-terminated string held in *buf*."""
    index = bytes(buf).find(0)
    return len(buf) if index < 0 else index


def _check_size(dst: bytearray | memoryview, size: int) -> int:
    size = _non_negative("size", size)
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")
    return size


def strlcpy(dst: bytearray | memoryview, src: bytes | bytearray | memoryview, size: int) -> int:
    """Copy the string in *src* into *dst*, writing at most *size* bytes.

    The copy is always NUL-terminated when *size* is non-zero. Returns the
    length of *src*, so a result of *size* or more means it was truncated.
    """
    size = _check_size(dst, size)
    src_len = _c_length(src)
    if size == 0:
        return src_len
    count = min(src_len, size - 1)
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return src_len


def strlcat(dst: bytearray | memoryview, src: bytes | bytearray | memoryview, size: int) -> int:
    """Append the string in *src* to the string in *dst*, within *size* bytes.

    Returns the length the result would have had with no limit: the
    length of *dst* (capped at *size*) plus the length of *src*.
    """
    size = _check_size(dst, size)
    nul = bytes(dst[:size]).find(0)
    dst_len = size if nul < 0 else nul
    src_len = _c_length(src)
    if dst_len < size:
        count = min(src_len, size - dst_len - 1)
        dst[dst_len : dst_len + count] = bytes(src[:count])
        dst[dst_len + count] = 0
    return dst_len + src_len