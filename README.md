# ftselect

A printf-style formatter with colour tags for terminal output, together with
a few small string helpers and a chunked line reader. It has no dependencies
outside the standard library.

## Formatting

`ftselect.fmt.core` expands `%` conversions and `{colour}` tags:

```python
from ftselect.fmt.core import sprintf, printf, dprintf

sprintf("%-5s|%05d|%#x", "ab", 42, 255)   # 'ab   |00042|0xff'
sprintf("{red}alert{eoc}")                # ANSI red, then reset
```

- `sprintf(fmt, *args)` returns the expanded text.
- `printf(fmt, *args)` writes it to standard output and returns its length.
- `dprintf(fd, fmt, *args)` writes it, UTF-8 encoded, to a file descriptor
  and returns the number of bytes written.

Conversions: `d i D u U o O x X b p s c f F %`, with the flags `- + space 0 #`,
a field width and a precision (either may be `*`, taken from the arguments),
and the length modifiers `h hh l ll j z L`. Integers are wrapped to the width
the length modifier gives (32 bits by default). `%b` prints binary, zero-padded
to a multiple of eight digits. `%s` given `None` prints `(null)`. An unknown
conversion character is printed as a character field of its own. Too few
arguments raise `TypeError`.

Colour tags are `{red}`, `{green}`, `{yellow}`, `{blue}`, `{magenta}`,
`{cyan}` and `{eoc}` (reset). An unknown tag is left in the text as written.
`ftselect.colours.colour_code(name)` returns the escape sequence for a name,
or `None`.

The pieces are usable on their own: `ftselect.fmt.spec.parse_spec` parses one
specification into a `Spec`, and `ftselect.fmt.fields.format_field` applies
precision, alternate form, sign and width to an already converted value.

## String helpers

```python
from ftselect.textutil import split, trim, binary_string

split("a,,b", ",")       # ['a', 'b']
trim("\t hi \n")         # 'hi'
binary_string(5, 8)      # '00000101'
```

`ftselect.textutil` also has `find`, `substring`, `upper`, `to_upper`,
`to_lower` and `number_length`.

## Reading lines

`ftselect.lines.LineReader` reads a stream in chunks and yields its lines
without their newline, as `str` or `bytes` to match the stream:

```python
import io
from ftselect.lines import LineReader

list(LineReader(io.StringIO("one\ntwo")))   # ['one', 'two']
```

## What it does not do

There is no interactive picker here: no full-screen selection list, no
keyboard handling, no terminal mode switching and no `ftselect` command. The
package provides the formatting and text helpers only.