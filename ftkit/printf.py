"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional

from ftkit.cstring import strdup
from ftkit.output import _write_all

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_INT_SIGN = 0x80000000
_STDOUT = 1


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, not {type(value).__name__}")
    return value


def _int32(num: int) -> int:
    num &= _UINT_MASK
    return num - (_UINT_MASK + 1) if num & _INT_SIGN else num


def format_hex(num: int, uppercase: bool = False) -> str:
    """Return ``num`` as an unsigned 64-bit hexadecimal number, without prefix."""
    value = _require_int(num, "num") & _ULONG_MASK
    return format(value, "X" if uppercase else "x")


def format_unsigned(num: int) -> str:
    """Return ``num`` as an unsigned 32-bit decimal number."""
    return str(_require_int(num, "num") & _UINT_MASK)


def format_int(num: int) -> str:
    """Return ``num`` as a signed 32-bit decimal number."""
    return str(_int32(_require_int(num, "num")))


def format_str(s: Optional[str]) -> str:
    """Return ``s`` up to its first NUL, or "(null)" for None."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"%s argument must be a str or None, not {type(s).__name__}")
    return strdup(s)


def format_ptr(address: Optional[int]) -> str:
    """Return an address as "0x" and lower-case hex, or "(nil)" for a null one."""
    if address is None or _require_int(address, "address") == 0:
        return "(nil)"
    return "0x" + format_hex(address, False)


def _format_char(c: Any) -> str:
    if isinstance(c, bool):
        raise TypeError("%c argument must be an int or a single character, not bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise TypeError(f"%c argument must be an int or a single character, got {c!r}")


_HANDLERS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": format_str,
    "p": format_ptr,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(_require_int(value, "%x argument") & _UINT_MASK, False),
    "X": lambda value: format_hex(_require_int(value, "%X argument") & _UINT_MASK, True),
}


def cformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Unknown conversions produce nothing and consume no argument; a lone
    trailing "%" is dropped.  Too few arguments raise TypeError.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a str, not {type(fmt).__name__}")
    remaining = iter(args)
    pieces = []
    chars = iter(strdup(fmt))
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        handler = _HANDLERS.get(spec)
        if handler is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(handler(value))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the bytes written."""
    data = cformat(fmt, *args).encode("utf-8")
    sys.stdout.flush()
    _write_all(_STDOUT, data)
    return len(data)