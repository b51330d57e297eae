# ftkit

A small toolkit of character, byte-buffer and string helpers that keep the
semantics of the classic C library routines (the same edge cases, limits and
results) with Python types in place of raw pointers. Positions come back as
indices, "not found" comes back as `None`, and misuse such as a negative
length or a too-small destination raises `ValueError` or `TypeError`.

## Modules

- `ftkit.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper` and `tolower`. Each takes an integer character code or a
  one-character string; the classifiers return `bool`, and `toupper` /
  `tolower` return a value of the same type they were given. Only the ASCII
  letters are converted.
- `ftkit.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`
  and `calloc`. Writers work on `bytearray` or writable `memoryview` buffers;
  readers also accept `bytes`. `memchr` returns an index or `None`, `memcmp`
  returns the difference of the first differing bytes, and `calloc` returns a
  zero-filled `bytearray`.
- `ftkit.cstring`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strncmp`, `strnstr`, `atoi` and `strdup`. A string ends at its first NUL
  (`"\0"` or byte 0) or at its end. `strlcpy` and `strlcat` write into a
  `bytearray` and return the length they tried to create; `strchr`,
  `strrchr` and `strnstr` return indices or `None`.
- `ftkit.strings`: `substr`, `strjoin`, `strtrim`, `split`, `itoa`,
  `striteri` and `strmapi`. `split` drops empty words; `striteri` calls a
  function on each item of a mutable sequence and stores any non-`None`
  result back in place; `strmapi` builds a new string from a function of
  index and character.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`,
  writing straight to an operating-system file descriptor with `os.write`.
  `None` passed to `putstr_fd` or `putendl_fd` writes nothing.
- `ftkit.printf`: `cformat` builds a string from a format holding `%c`, `%s`,
  `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`; `printf` writes it to
  standard output (file descriptor 1) and returns the number of bytes
  written. The helpers `format_int` (signed 32-bit), `format_unsigned`
  (unsigned 32-bit), `format_hex` (unsigned 64-bit), `format_str` (`None`
  gives `"(null)"`) and `format_ptr` (`None` or 0 gives `"(nil)"`) render
  single values.

## Examples

```python
from ftkit.chars import toupper
from ftkit.cstring import atoi, strchr, strlcpy
from ftkit.memory import memset
from ftkit.printf import cformat
from ftkit.strings import itoa, split, strtrim

toupper("a")                   # "A"
toupper(97)                    # 65
atoi("   -123abc")             # -123
strchr("hello", "l")           # 2
split("  hello  world ", " ")  # ["hello", "world"]
itoa(-2147483648)              # "-2147483648"
strtrim("xxhixx", "x")         # "hi"

buf = bytearray(b"abcdefghi\0")
memset(buf, ord("A"), 3)       # bytearray(b"AAAdefghi\x00")

dst = bytearray(4)
strlcpy(dst, b"hello", 4)      # 5, dst == bytearray(b"hel\x00")

cformat("%d %x %s", -5, 255, None)  # "-5 ff (null)"
cformat("%u", -1)                   # "4294967295"
```

## What it does not do

- There is no manual memory management: `calloc` and `strdup` simply return
  new Python objects, and nothing needs to be freed.
- `cformat` and `printf` support no flags, field widths, precisions or length
  modifiers. An unknown conversion produces nothing and uses no argument, a
  lone trailing `%` is dropped, and too few arguments raise `TypeError`.
- There is no command-line program; the package is a library only.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```