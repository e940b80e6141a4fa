"""A minimal printf supporting the conversions c, s, p, d, i, u, x, X and %.

No flags, widths or precisions are understood. Integer arguments are
wrapped to the width of their C type: ``%d``/``%i`` to a signed 32-bit
int, ``%u``/``%x``/``%X`` to an unsigned 32-bit int and ``%p`` to an
unsigned 64-bit value.
"""

from __future__ import annotations

import operator
import sys

from ftkit.strings import itoa

__all__ = ["FormatError", "format_arg", "render", "printf"]

_CONVERSIONS = frozenset("cspdiuxX%")
_UINT32 = 2**32
_UINT64 = 2**64


class FormatError(ValueError):
    """Raised for an unknown conversion, a dangling '%' or missing arguments."""


def _as_int(arg: object, spec: str) -> int:
    if isinstance(arg, bool):
        raise TypeError(f"%{spec} expects an int, got bool")
    try:
        return operator.index(arg)
    except TypeError:
        raise TypeError(f"%{spec} expects an int, got {type(arg).__name__}") from None


def _format_char(arg: object) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {len(arg)} characters")
        return arg
    return chr(_as_int(arg, "c") & 0xFF)


def _format_str(arg: object) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a str or None, got {type(arg).__name__}")
    return arg


def _format_ptr(arg: object) -> str:
    address = 0 if arg is None else _as_int(arg, "p") % _UINT64
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _format_signed(arg: object, spec: str) -> str:
    value = (_as_int(arg, spec) + 2**31) % _UINT32 - 2**31
    return itoa(value)


def format_arg(spec: str, arg: object) -> str:
    """Render one argument for the conversion character *spec*.

    For ``'%'`` the argument is ignored and a literal percent sign returned.
    """
    if spec == "c":
        return _format_char(arg)
    if spec == "s":
        return _format_str(arg)
    if spec == "p":
        return _format_ptr(arg)
    if spec in ("d", "i"):
        return _format_signed(arg, spec)
    if spec == "u":
        return itoa(_as_int(arg, spec) % _UINT32)
    if spec == "x":
        return f"{_as_int(arg, spec) % _UINT32:x}"
    if spec == "X":
        return f"{_as_int(arg, spec) % _UINT32:X}"
    if spec == "%":
        return "%"
    raise FormatError(f"unknown conversion {spec!r}")


def render(fmt: str, *args: object) -> str:
    """Return *fmt* with every conversion replaced by its formatted argument.

    Arguments beyond those the format uses are ignored.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec not in _CONVERSIONS:
            if not spec:
                raise FormatError("format ends with a lone '%'")
            raise FormatError(f"unknown conversion {spec!r}")
        if spec == "%":
            pieces.append("%")
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        pieces.append(format_arg(spec, arg))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Render *fmt* with *args*, write it to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)