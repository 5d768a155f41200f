# elfnm

`elfnm` holds the building blocks of an `nm`-style symbol lister: parsing of
its command-line flags, the ordering it uses for symbol names, a small
printf-style formatter, and a set of helpers for characters, byte buffers,
strings, lists of strings, linked lists and line-by-line reading.

## Installation

```
pip install .
```

## What the package does not do

The package does not read ELF files. It has no code to recognise an ELF
header, walk section headers, decode symbol tables or assign symbol-type
letters, and it installs no command. The modules below are the parts that
such a tool would be built on.

## Modules

### `elfnm.options`

`parse_args(argv)` parses the arguments that follow the program name and
returns a frozen `Options` dataclass. An argument of two or more characters
that starts with `-` is a group of flags; anything else is a file name.
The known flags are:

| Flag | `Options` field |
| ---- | --------------- |
| `-a` | `debug_syms` |
| `-g` | `extern_only` |
| `-r` | `reverse_sort` |
| `-u` | `undefined_only` |
| `-p` | `no_sort` |

`Options.filenames` holds the file names in the order given, and
`Options.files` gives them, or `("a.out",)` when none was given. An unknown
flag character raises `InvalidOptionError`, a `ValueError` whose `option`
attribute is the offending character.

```python
from elfnm.options import parse_args

options = parse_args(["-gr", "prog.o"])
options.extern_only, options.reverse_sort, options.files
# (True, True, ('prog.o',))
```

### `elfnm.compare`

`compare_nm_style(s1, s2)` compares two names while ignoring `_`, `.` and
`@` and ASCII case; only the first 255 kept characters take part. Names that
tie on that basis are ordered by a plain character comparison. The sign of
the result gives the order.

`sort_names(items, key=None, reverse=False)` returns a sorted list using that
comparison; `key` extracts the name from each item.

```python
from elfnm.compare import sort_names

sort_names(["main", "_start", "abc"])
# ['abc', 'main', '_start']
```

### `elfnm.output`

`format_string(fmt, *args)` renders the conversions `%c`, `%s`, `%p`, `%d`,
`%i`, `%u`, `%x`, `%X` and `%%`; an unknown conversion prints nothing. A
`%s` given `None` prints `(null)`. A trailing lone `%` or too few arguments
raise `ValueError`. `printf(fmt, *args)` writes the result to standard output
and returns its length. `put_char`, `put_str`, `put_endl` and `put_nbr` write
to a given stream, standard output by default.

```python
from elfnm.output import format_string

format_string("%s=%x at %p", "n", 255, 16)
# 'n=ff at 0x10'
```

### `elfnm.lines`

`LineReader(stream, buffer_size=500)` reads a text or binary stream a buffer
at a time and yields lines with their newline kept; the last line may lack
one. `read_line()` returns `None` at the end, and the reader is iterable. A
buffer size outside 1 to 99999 falls back to 500.

```python
import io
from elfnm.lines import LineReader

list(LineReader(io.StringIO("one\ntwo"), buffer_size=2))
# ['one\n', 'two']
```

### `elfnm.lists`

`LinkedList(items=None)` is a singly linked list of `Node` objects with
`add_front`, `add_back`, `pop_front`, `last`, `clear`, `for_each`, `map`,
`len()` and iteration. `pop_front` and `last` raise `IndexError` on an empty
list.

### `elfnm.strings`

String helpers returning indices or `None` rather than pointers: `strchr`,
`strrchr`, `strcmp`, `strncmp`, `strnstr`, `atoi`, `itoa`, `substr`,
`strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy` and
`strlcat`. `strlcpy` and `strlcat` return the resulting text together with
the length the full result would have had.

### `elfnm.arrays`

Helpers for lists of strings: `array_dup`, `array_join`, `prepend`,
`array_len`, `array_print` (each item as `|<tab>{item}<tab>|` on its own line)
and `print_array` (each item preceded by `-><tab>`).

### `elfnm.chars` and `elfnm.memory`

`elfnm.chars` classifies and converts ASCII characters given as a code point
or a one-character string: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
`is_print`, `is_lower`, `is_upper`, `to_lower`, `to_upper`.

`elfnm.memory` works on byte buffers: `mem_set`, `bzero`, `calloc`,
`mem_copy`, `mem_move` (overlap-safe, by offsets within one buffer),
`mem_chr` and `mem_cmp`. Lengths past the end of a buffer raise
`ValueError`.

## Running the tests

```
pip install .[test]
pytest
```