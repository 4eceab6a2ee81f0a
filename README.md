# fmtprint

A small printf-style formatter. It understands a compact set of conversions
with the `-` and `0` flags, a field width and a precision, and either returns
the formatted text or writes it to a stream and returns its length.

## Supported conversions

| Conversion | Argument | Output |
|------------|----------|--------|
| `c` | int (taken as a byte value) or a one-character str | a single character |
| `s` | str or `None` (other objects go through `str()`) | the string, or `(null)` for `None` |
| `p` | int, `None` (address 0), or any object (its `id()`) | `0x` followed by lower-case hex |
| `d`, `i` | int | signed decimal |
| `u` | int | unsigned decimal (negatives wrap to 32 bits) |
| `x`, `X` | int | lower- or upper-case hex (negatives wrap to 32 bits) |
| `%` | none | a literal `%` |

Integer arguments are first truncated to a signed 32-bit value. Width and
precision can each be given as `*`, in which case they are taken from the
argument list; a negative `*` width means left alignment. For the integer
conversions, a zero value with precision `0` prints nothing.

## Usage

```python
from fmtprint.printf import sprintf, printf

text = sprintf("%5d|%-5s|%.3x", 42, "ab", 255)
# '   42|ab   |0ff'

count = printf("%s has %d items\n", "cart", 3)   # writes to stdout, returns 17
```

`sprintf(fmt, *args)` returns the formatted string. `printf(fmt, *args, file=None)`
writes it to `sys.stdout`, or to the stream given as `file`, and returns the
number of characters written.

Errors:

- A spec that does not end in a conversion letter (for example `%5` at the
  end of a format, or before an unknown letter) raises
  `fmtprint.printf.FormatError`, a subclass of `ValueError`. Its `spec`
  attribute holds the offending spec and `partial` the text produced before
  it; `printf` writes that partial text before raising.
- Running out of arguments raises `TypeError`.

## Building blocks

- `fmtprint.convert`: `to_decimal`, `to_unsigned`, `to_hex`, `to_pointer`,
  `wrap_unsigned` and `numlen` turn integers into text.
- `fmtprint.spec`: `find_specs` lists the conversion specs of a format string;
  `spec_is_valid`, `find_flag`, `find_width` and `find_precision` read them.
- `fmtprint.numbers`: `format_signed`, `format_unsigned`, `format_hex` and
  their padding helpers format one integer conversion.
- `fmtprint.text`: `format_string`, `format_char`, `format_pointer` and their
  padding helpers format one string, character or pointer conversion.
- `fmtprint.printf`: `format_conversion` and `format_percent` format a single
  spec; `sprintf` and `printf` handle whole format strings.
- `fmtprint.strutil`: string helpers with C-style semantics: `atoi`, `itoa`,
  `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strlcat` and `strlcpy`.

## What it does not do

There are no floating-point conversions (`f`, `e`, `g`), no length modifiers
(`l`, `h`), and no `+`, space or `#` flags. The package is a library only; it
installs no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```