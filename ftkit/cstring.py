"""NUL-terminated string primitives over str and bytes-like values.

A string ends at its first NUL character (``"\\0"`` or byte 0), or at its
end if it holds none.  Positions are returned as indices, and None is
returned where nothing is found.
"""

from __future__ import annotations

import re
from itertools import chain, islice, repeat
from typing import Iterator, Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
ByteText = Union[bytes, bytearray, memoryview]
CharLike = Union[int, str]

_ATOI = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")


def _terminated(s: Text) -> Union[str, bytes]:
    """Return ``s`` cut at its first NUL, as a str or as bytes."""
    if isinstance(s, str):
        end = s.find("\0")
    else:
        s = bytes(s)
        end = s.find(b"\0")
    return s if end < 0 else s[:end]


def _terminated_bytes(s: ByteText, name: str) -> bytes:
    if isinstance(s, str):
        raise TypeError(f"{name} must be bytes-like, not str")
    return bytes(_terminated(s))


def _needle(s: Text, c: CharLike) -> Union[str, bytes]:
    """Return the single character to look for, of the same kind as ``s``."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a single character, got bool")
    if isinstance(c, int):
        code = c & 0xFF
    elif isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
    else:
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    if isinstance(s, str):
        return chr(code)
    if code > 0xFF:
        raise ValueError(f"character {c!r} does not fit in a byte")
    return bytes([code])


def _codes(text: Union[str, bytes]) -> Iterator[int]:
    return (ord(ch) for ch in text) if isinstance(text, str) else iter(text)


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strlcpy(dst: Union[bytearray, memoryview], src: ByteText, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    source = _terminated_bytes(src, "src")
    if size == 0:
        return len(source)
    count = min(size - 1, len(source))
    if count + 1 > len(dst):
        raise ValueError(f"destination of {len(dst)} bytes cannot hold {count + 1} bytes")
    dst[:count] = source[:count]
    dst[count] = 0
    return len(source)


def strlcat(dst: Union[bytearray, memoryview], src: ByteText, size: int) -> int:
    """Append ``src`` to the NUL-terminated ``dst`` whose capacity is ``size``.

    Returns the length the joined string would have had without truncation.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    source = _terminated_bytes(src, "src")
    dst_len = bytes(dst[:size]).find(0)
    if dst_len < 0:
        if size > len(dst):
            raise ValueError("destination is not NUL-terminated")
        return size + len(source)
    count = min(len(source), size - 1 - dst_len)
    end = dst_len + count
    if end >= len(dst):
        raise ValueError(f"destination of {len(dst)} bytes cannot hold {end + 1} bytes")
    dst[dst_len:end] = source[:count]
    dst[end] = 0
    return dst_len + len(source)


def _is_nul(target: Union[str, bytes]) -> bool:
    return target in ("\0", b"\0")


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Looking for NUL gives the index of the terminator.
    """
    text = _terminated(s)
    target = _needle(s, c)
    if _is_nul(target):
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Looking for NUL gives the index of the terminator.
    """
    text = _terminated(s)
    target = _needle(s, c)
    if _is_nul(target):
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    or 0 if the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    first = chain(_codes(_terminated(s1)), repeat(0))
    second = chain(_codes(_terminated(s2)), repeat(0))
    for a, b in islice(zip(first, second), n):
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Return the index of the first ``little`` lying wholly within the first
    ``length`` characters of ``big``, or None.  An empty ``little`` is found at 0."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[:length].find(needle)
    return None if index < 0 else index


def atoi(text: Text) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Anything unparsable yields 0.
    """
    if not isinstance(text, str):
        text = bytes(text).decode("latin-1")
    match = _ATOI.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def strdup(s: Text) -> Union[str, bytes, bytearray]:
    """Return a copy of ``s`` up to its first NUL, of the same kind as ``s``."""
    text = _terminated(s)
    if isinstance(s, bytearray):
        return bytearray(text)
    return text