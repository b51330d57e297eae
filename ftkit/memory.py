"""Byte-buffer operations on mutable and read-only byte sequences."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    _check_length(n, dest, src)
    if dest is src:
        return dest
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` into ``dest``; the regions may overlap."""
    _check_length(n, dest, src)
    if dest is src:
        return dest
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` (mod 256) in the
    first ``n`` bytes of ``data``, or None if there is none."""
    _check_length(n, data)
    target = value & 0xFF
    return next((index for index, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(first: ReadableBuffer, second: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb`` elements of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)