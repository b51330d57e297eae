"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from ftkit.cstring import strdup

CharLike = Union[int, str]
TextLike = Union[str, bytes, bytearray, memoryview]


def _write_all(fd: int, data: bytes) -> None:
    """Write every byte of ``data`` to ``fd``, retrying on short writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _text_bytes(s: TextLike) -> bytes:
    text = strdup(s)
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``; an int is taken modulo 256 as a byte."""
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: Optional[TextLike], fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _text_bytes(s))


def putendl_fd(s: Optional[TextLike], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _text_bytes(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, not {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))