"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

import sys
from functools import partial

from ftfmt.conversions import (
    format_char,
    format_hex,
    format_pointer,
    format_signed,
    format_string,
    format_unsigned,
)


class FormatError(ValueError):
    """Raised for a missing template, a bad directive or a missing argument."""


_CONVERSIONS = {
    "c": format_char,
    "s": format_string,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": partial(format_hex, upper=False),
    "X": partial(format_hex, upper=True),
    "p": format_pointer,
}


def _pieces(template, args):
    remaining = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            shown = f"%{spec}" if spec else "trailing %"
            raise FormatError(f"unsupported directive: {shown}")
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        yield convert(value)


def render(template, *args):
    """Return the template with its directives replaced by the arguments.

    Arguments left over after the last directive are ignored.
    """
    if template is None:
        raise FormatError("no template given")
    if not isinstance(template, str):
        raise TypeError(f"template must be a string, got {type(template).__name__}")
    return "".join(_pieces(template, args))


def printf(template, *args, stream=None):
    """Write the rendered template to a stream (stdout by default).

    Returns the number of characters written.
    """
    text = render(template, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)