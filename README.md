# ftkit

A small toolkit with no dependencies. It has helpers for characters, byte
buffers, strings, a singly linked list and a minimal `printf`.

## Installation

```
pip install ftkit
```

To run the test suite:

```
pip install "ftkit[test]"
pytest
```

## Conventions

- The string functions treat a string as ending at its first NUL character
  (`"\0"`). Anything after it is ignored.
- The search functions return an index, or `None` when nothing is found.
- Bad arguments raise `TypeError`, `ValueError` or `IndexError`. They do not
  return a status code.

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and
`to_upper`.

- Each function accepts either a single-character string or an integer code.
- The predicates return a `bool` and test the ASCII ranges only.
- The case converters return a value of the same kind they were given.

### `ftkit.memory`

Operations on `bytearray` and other buffers.

- `memset(buf, c, n)` and `bzero(buf, n)` change `buf` in place and return it.
- `memcpy(dest, src, n)` copies `n` bytes into `dest` and returns `dest`.
- `memmove(buf, dest_offset, src_offset, n)` copies `n` bytes within one
  buffer. The two regions may overlap.
- `memchr(data, c, n)` returns an index or `None`.
- `memcmp(a, b, n)` returns the difference of the bytes at the first mismatch,
  or `0`.
- `calloc(count, size)` returns a zero-filled `bytearray`.
- A byte count that is larger than a buffer raises `IndexError`.

### `ftkit.text`

Parsing and searching.

- `atoi(s)` skips leading whitespace, accepts one optional sign, then reads
  digits.
- `itoa(n)` returns the decimal text of `n`.
- `strlen(s)` returns the number of characters before the first NUL.
- `strchr(s, c)` and `strrchr(s, c)` return an index or `None`. Searching for
  NUL returns `strlen(s)`.
- `strncmp(s1, s2, n)` compares at most `n` characters.
- `strnstr(haystack, needle, length)` searches only the first `length`
  characters of `haystack`.
- `strlcpy(src, size)` returns a tuple `(copied_text, len(src))`.
- `strlcat(dst, src, size)` returns a tuple `(result_text, attempted_length)`.
- `strdup(s)` returns a copy of `s` up to its first NUL.

### `ftkit.transform`

Building new strings.

- `substr(s, start, length)` returns at most `length` characters from
  `start`.
- `strjoin(s1, s2)` counts `None` as empty, and returns `None` when both are
  `None`.
- `strtrim(s, charset)` removes the characters of `charset` from both ends.
- `split(s, sep)` returns the non-empty pieces.
- `strmapi(s, f)` returns a new string built from `f(index, char)`.
- `striteri(s, f)` changes a mutable sequence of characters in place.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream. The
default stream is standard output. `put_str(None)` and `put_endl(None)` write
nothing.

### `ftkit.linked_list`

`Node` holds `content` and `next`. `LinkedList(items=())` keeps a reference to
its first node in `head`, and has these methods:

- `add_front` and `add_back` add an item and return its new node.
- `last()` returns the last node, or `None` when the list is empty.
- `clear(delete)` removes every node. It calls `delete` on each content first
  when a function is given.
- `iterate(f)` calls `f` on each content in order.
- `map(f, delete)` returns a new list. If `f` raises, the contents already
  produced are passed to `delete` and the exception propagates.
- `len()` and iteration over the contents also work.

### `ftkit.printf`

`printf(fmt, *args, stream=None)` supports the conversions
`%c %s %p %d %i %u %x %X %%` and returns the number of characters written.

- `%d`, `%i`, `%u`, `%x` and `%X` wrap their value to 32 bits.
- `%s` of `None` prints `(null)`.
- `%p` of `None` or `0` prints `(nil)`. Any other object that is not an
  integer prints its identity.
- An unknown conversion prints nothing and uses no argument.
- A `%` at the end of the format is printed as it is.
- Too few arguments raise `TypeError`.

The lower-level helpers `dispatch`, `print_char`, `print_str`, `print_ptr`,
`print_nbr`, `print_unsigned` and `print_hex` are also available.

## Examples

```python
import io

from ftkit.linked_list import LinkedList
from ftkit.printf import printf
from ftkit.transform import split, strtrim

split("----42---Madrid----", "-")      # ['42', 'Madrid']
strtrim("xxx42xxx", "x")              # '42'

items = LinkedList()
items.add_back("hola")
items.add_back("mundo")
upper = items.map(str.upper, None)
list(upper)                           # ['HOLA', 'MUNDO']

out = io.StringIO()
printf("%s has %d items (%x)\n", "list", 2, 255, stream=out)
out.getvalue()                        # 'list has 2 items (ff)\n'
```

## Limitations

- ftkit is a library only. It installs no command-line program.
- `printf` has no flags, field widths or precision.