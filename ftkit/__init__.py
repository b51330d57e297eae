"""Character, byte-buffer, string, file-descriptor output and printf-style formatting helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstring", "strings", "output", "printf"]