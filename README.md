# solong

Small, dependency-free helpers for a tile-based puzzle game: character
classification, byte-buffer operations, bounded string routines, a singly
linked list, a buffered line reader and a `printf`-style formatter.

## Installing

```
pip install .
```

## Modules

### `solong.chars`

ASCII classification and conversion. Every function takes either a
one-character string or an integer code.

```python
from solong.chars import atoi, is_alnum, to_upper

atoi("  -42abc")   # -42: skips whitespace, reads one sign, stops at a non-digit
to_upper("a")      # "A"
to_upper(97)       # 65
is_alnum("_")      # False
```

Also: `is_alpha`, `is_digit`, `is_ascii`, `is_print`, `to_lower`.

### `solong.memory`

Operations on `bytearray` buffers: `bzero`, `memset`, `memcpy`, `memmove`
(overlap-safe, with offsets into one buffer), `memchr` (returns an index or
`None`), `memcmp` (difference of the first differing bytes) and `calloc`,
which returns a zeroed buffer and raises `MemoryError` when `count * size`
would exceed 4294967296 bytes. Spans that run past a buffer raise `IndexError`;
negative counts raise `ValueError`.

```python
from solong.memory import memmove

buf = bytearray(b"Hello, World!\0\0\0\0\0\0\0")
memmove(buf, 5, 0, 10)   # b"HelloHello, Wor..."
```

### `solong.textops`

String routines that return indices instead of pointers and `None` for
"not found". Searching for `"\0"` with `strchr`/`strrchr` gives `len(text)`.

```python
from solong.textops import split, strlcpy, strlcat, strncmp

split("a,,b,", ",")         # ["a", "b"]
strlcpy("123456789", 5)     # ("1234", 9)
strlcat("123", "4567", 6)   # ("12345", 7)
strncmp("abc", "abd", 2)    # 0
```

Also: `strrchr`, `strnstr`, `substr`, `strjoin`, `strtrim`, `count_words`,
`strmapi`, `striteri`.

### `solong.linkedlist`

`LinkedList` is a singly linked list of `Node` objects with `push_front`,
`push_back`, `last`, `len()`, iteration, `for_each`, `clear(delete)` and
`map(func, delete)`. If `func` raises part way through `map`, the contents
already produced are passed to `delete` before the error propagates.

```python
from solong.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
list(items.map(lambda x: x * 2, lambda x: None))   # [2, 4, 6]
```

### `solong.linereader`

`LineReader` reads a text or binary stream in chunks of `buffer_size`
(10 by default) and yields lines with their newline kept; the last,
unterminated piece is returned as is.

```python
import io
from solong.linereader import LineReader

list(LineReader(io.StringIO("one\ntwo")))   # ["one\n", "two"]
```

### `solong.printf`

`format_printf` expands `%c %s %p %d %i %u %x %X %%`. An unknown conversion
is kept as written, a lone trailing `%` produces nothing, and too few
arguments raise `TypeError`. `printf` writes the result to a stream (standard
output by default) and returns its length.

```python
from solong.printf import format_printf, pointer_string

format_printf("%d moves, %x, %s", 12, 255, None)   # "12 moves, ff, (null)"
format_printf("%u", -1)                            # "4294967295"
pointer_string(None)                               # "(nil)"
```

Also: `itoa`, `utoa`, `hex_string`, `put_char`, `put_str`, `put_endl`,
`put_nbr`.

## What this package does not do

The package holds only the helper layer. It has no game: it does not read or
check map files, move a player, count coins, draw tiles or open a window, and
it installs no command to run.

## Running the tests

```
pip install ".[test]"
pytest
```