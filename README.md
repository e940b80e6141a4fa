# ftkit

Small helpers that behave like their C library counterparts: ASCII
character classification, byte-buffer operations, string utilities,
output to file descriptors and a minimal `printf`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each takes an integer code point or a one-character string.
The `is_*` functions return `bool`. `to_upper` and `to_lower` change only
ASCII letters and return a value of the same kind they were given:

```python
from ftkit.chars import is_alpha, to_upper

is_alpha("q")    # True
to_upper("q")    # 'Q'
to_upper(97)     # 65
```

### `ftkit.memory`

`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`.
Destination buffers must be writable (`bytearray` or a writable
`memoryview`). A byte count that is negative or larger than a buffer
involved raises `ValueError`. `memchr` returns an index or `None`;
`memcmp` returns the difference of the first differing bytes, or 0.
`calloc` returns a zeroed `bytearray` and raises `MemoryError` when the
total size would overflow the platform's size type.

### `ftkit.strings`

`atoi`, `itoa`, `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
`strdup`, `substr`, `strjoin`, `split`, `strtrim`, `strmapi`, `striteri`,
`strlcpy`, `strlcat`.

- Searches return an index, or `None` when nothing is found. Searching for
  `"\0"` with `strchr` or `strrchr` finds the end of the string, `len(s)`.
- `atoi` skips leading whitespace and one sign, reads digits, and wraps the
  result to a signed 32-bit integer.
- `split` drops empty words; `strtrim` strips the given characters from
  both ends.
- `striteri` calls `f(index, item)` on a mutable sequence and replaces the
  item whenever `f` returns something other than `None`.
- `strlcpy` and `strlcat` work on byte buffers holding NUL-terminated
  strings and return the length the result would have had with no limit.

### `ftkit.output`

`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write directly to an
open file descriptor with `os.write`. Strings are encoded as UTF-8; an
integer passed to `putchar_fd` is written as its low byte; `putstr_fd`
writes nothing for `None`.

### `ftkit.printf`

`format_arg`, `render`, `printf` and the `FormatError` exception.

Supported conversions are `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and
`%%`. Flags, widths and precisions are not supported. Integers are wrapped
to their C type: `%d`/`%i` to signed 32-bit, `%u`/`%x`/`%X` to unsigned
32-bit, `%p` to unsigned 64-bit.

```python
from ftkit.printf import render, printf

render("H%cllo%s%x%s!", "e", " ", 0x42, "tokyo")   # 'Hello 42tokyo!'
render("%s", None)                                 # '(null)'
render("%p", None)                                 # '(nil)'
render("%d", -2147483649)                          # '2147483647'

count = printf("%d items\n", 42)   # writes to standard output, returns 9
```

`render` raises `FormatError` for an unknown conversion, a trailing lone
`%`, or too few arguments; extra arguments are ignored. An argument of the
wrong type raises `TypeError`.

## What it does not do

ftkit is a library only: it installs no command-line program.