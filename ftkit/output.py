"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import operator
import os

from ftkit.strings import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _char_bytes(c: int | str) -> bytes:
    """Encode a single character given as an int (low byte kept) or a str."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c.encode("utf-8")
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: int | str, fd: int) -> None:
    """Write the character *c* to the file descriptor *fd*.

    An integer is written as its low byte.
    """
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: str | None, fd: int) -> None:
    """Write *s* to *fd*, encoded as UTF-8. None writes nothing."""
    if s is None:
        return
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str | None, fd: int) -> None:
    """Write *s* followed by a newline to *fd*. None writes only the newline."""
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of the integer *n* to *fd*."""
    if isinstance(n, bool):
        raise TypeError("expected an int, got bool")
    putstr_fd(itoa(operator.index(n)), fd)