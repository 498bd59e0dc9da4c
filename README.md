# ftfmt

A small, strict printf-style formatter. It understands exactly these conversions:

| Spec | Argument | Output |
|------|----------|--------|
| `%c` | a single-character string, or an integer | the character; an integer is taken as a byte value (0–255) |
| `%s` | a string, or `None` | the string up to its first NUL character, or `(null)` |
| `%d`, `%i` | an integer | signed decimal (32-bit) |
| `%u` | an integer | unsigned decimal (32-bit) |
| `%x`, `%X` | an integer | hexadecimal, lower or upper case (32-bit) |
| `%p` | an address (integer) or `None` | `0x...` in lower-case hex, or `(nil)` for `None` or zero |
| `%%` | none | a literal `%` |

Integers are taken the way the matching C type would take them: `%u`, `%x` and `%X`
wrap values into the unsigned 32-bit range, `%d` and `%i` wrap them into the signed
32-bit range, and `%p` wraps addresses into the unsigned 64-bit range. Any object
that supports `__index__` is accepted where an integer is expected.

There are no flags, widths or precisions.

## Errors

`FormatError` (a subclass of `ValueError`) is raised when:

- the template is `None`;
- `%` is followed by a character other than those above, or ends the template;
- a directive has no argument left to consume.

`TypeError` is raised when the template is not a string, when `%s` is given something
other than a string or `None`, or when an integer directive is given a non-integer.
`%c` raises `ValueError` for a string that is not exactly one character long.

Arguments left over after the last directive are ignored.

## Installation

```
pip install ftfmt
```

## Usage

```python
from ftfmt.printf import render, printf, FormatError

render("Letter: %c", "a")          # 'Letter: a'
render("Number: %d", -255)         # 'Number: -255'
render("Unsigned: %u", -255)       # 'Unsigned: 4294967041'
render("Hex: %x / %X", 255, 255)   # 'Hex: ff / FF'
render("Null: %s", None)           # 'Null: (null)'
render("Pointer: %p", None)        # 'Pointer: (nil)'
render("100%%")                    # '100%'

import sys
count = printf("hello %s\n", "world", stream=sys.stdout)  # writes the text and returns 12

try:
    render("hello%")
except FormatError as exc:
    print("bad template:", exc)
```

`render` returns the formatted text. `printf` writes it to `stream`, which defaults to
standard output, and returns the number of characters written. A template that fails
to render raises before anything is written.

The single conversions are also available on their own in `ftfmt.conversions`:
`format_char`, `format_string`, `format_signed`, `format_unsigned`,
`format_hex(value, upper)` and `format_pointer`.

## Running the tests

```
pip install -e .[test]
pytest
```