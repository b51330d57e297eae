"""Higher-level string helpers: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from ftkit.cstring import strdup


def _text(s: str, name: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str, not {type(s).__name__}")
    return strdup(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start past the end gives an empty string.
    """
    text = _text(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _text(s1, "s1") + _text(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return _text(s, "s").strip(_text(charset, "charset"))


def split(s: str, sep: Union[str, int]) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    text = _text(s, "s")
    if isinstance(sep, bool):
        raise TypeError("sep must be a single character or an int")
    if isinstance(sep, int):
        sep = chr(sep & 0xFF)
    elif not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, not {type(n).__name__}")
    return str(n)


def striteri(
    buffer: Optional[MutableSequence],
    func: Callable[[int, object], object],
) -> None:
    """Call ``func(index, item)`` on each item of ``buffer`` up to its first NUL.

    A result other than None replaces the item in place.
    """
    if buffer is None:
        return
    for index, item in enumerate(buffer):
        if item == 0 or item == "\0":
            break
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement


def strmapi(s: Optional[str], func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each char of ``s``.

    None gives an empty string.
    """
    if s is None:
        return ""
    text = _text(s, "s")
    return "".join(func(index, ch) for index, ch in enumerate(text))