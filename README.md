# tinylibc

A small library of C-flavoured helpers for Python. It offers lenient number
and text conversions, NUL-aware string routines, series-based math, a
`printf`/`scanf` pair, environment lookup, a simulated heap allocator and a
command that runs `gcc` with a configured include path and extra objects.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `tinylibc.convert`

- `itoa(num)` returns the decimal text of an integer. Floats are truncated
  toward zero.
- `ftoa(num)` returns the integer part, a dot and up to nine fraction digits.
- `atoi(text)` parses a leading, optionally signed integer after skipping
  whitespace. It returns 0 if there is none.
- `atof(text)` parses a leading decimal number after skipping spaces and tabs.

### `tinylibc.strings`

Strings are treated as ending at their first NUL character. Search functions
return an index into the string, or `None` when nothing matches.

- `strcmp(a, b)` returns `True` if the strings are equal.
- `strcmp_all(first, *args)` returns `True` if every further string equals
  `first`.
- `strncmp(a, b, n)` returns the character difference at the first mismatch
  within `n` characters, or 0.
- `strchr(s, c)`, `strrchr(s, c)` and `strstr(s, needle)` find characters and
  substrings.
- `memcpy(dest, src, n)` copies bytes and `memset(buffer, value, n)` fills
  bytes in a `bytearray`. Both raise `ValueError` if `n` does not fit the
  buffers.

### `tinylibc.approx`

The functions here are approximations built from series: `ln`, `log(base, x)`,
`lg`, `lb`, `exp`, `power`, `sqrt` and `hypot`. The module also has `ceil`,
`floor` and `round_half_up`, which truncate toward zero, as well as `absolute`
and `fabs`. Functions with a restricted domain return -1 outside it instead of
raising. The results are approximate and lose accuracy away from small inputs.

### `tinylibc.formatting`

- `format_printf(fmt, *args)` replaces `%s`, `%d`, `%f` and `%c` with the
  arguments, in order. Any other `%` is kept as it is. `None` given for `%s`
  prints `(null)`. Too few arguments raise `TypeError`.
- `printf(fmt, *args, file=None)` writes the formatted text to `file`, or to
  standard output if no file is given.
- `scanf(spec, stream=None)` reads one line from `stream`, or from standard
  input if no stream is given. It returns the line for `%s`, an integer for
  `%d` and a float for `%f`. A spec that does not start with `%` returns
  `None`. An unsupported conversion raises `ValueError`.

### `tinylibc.environment`

- `getenv(name, environ=None)` returns the value of a variable, or `None` if
  it is not set.
- `setenv(name, value, overwrite=True, environ=None)` sets a variable. If the
  variable already exists and `overwrite` is false, it is left unchanged.

Both functions work on `os.environ` unless you pass another mapping.

### `tinylibc.heap`

`Heap(limit=None)` is a first-fit allocator over a growable byte arena.
Pointers are integer offsets into the arena, and sizes are rounded up to 16
bytes. Its methods are:

- `malloc(size)`
- `free(ptr)`
- `realloc(ptr, size)`
- `read(ptr, n)`
- `write(ptr, data)`

`malloc` returns `None` for a non-positive size, or when the arena would grow
past `limit`. When a block is freed, it is merged with adjacent free blocks.
Passing a pointer that is not an allocated block raises `ValueError`. The heap
is a simulation: it hands out offsets into its own buffer, not process memory.

## Examples

```python
from tinylibc.convert import itoa, atoi
from tinylibc.formatting import format_printf
from tinylibc.heap import Heap

itoa(-42)                                # "-42"
atoi("  +17abc")                         # 17
format_printf("%s has %d items", "box", 3)   # "box has 3 items"

heap = Heap()
ptr = heap.malloc(8)
heap.write(ptr, b"hello")
heap.read(ptr, 5)                        # b"hello"
heap.free(ptr)
```

## Commands

`wcc` runs `gcc` with these arguments, in order:

1. `-Wno-builtin-declaration-mismatch`
2. `-I` followed by the value of `LD_PATHS`
3. your own arguments
4. each non-empty colon-separated entry of `SO_PATHS`

The whole command line is capped at 1023 arguments.

Both variables must be set. If either one is missing, `wcc` prints an error
and exits with status 1. Otherwise it exits with gcc's status. If gcc cannot
be started, or gcc is killed by a signal, it exits with status 1.

```
LD_PATHS=./include SO_PATHS=lib/a.so:lib/b.so wcc main.c -o main
```

`tinylibc-getenv` asks for a variable name on standard input and prints
`Value: ` followed by the variable's value. If the variable is not set, it
prints `(null)`.

```
tinylibc-getenv
```