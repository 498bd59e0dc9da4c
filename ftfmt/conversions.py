"""Rendering of single values for the supported conversion directives."""

import operator

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"

_UINT_BITS = 32
_UINT_MASK = (1 << _UINT_BITS) - 1
_INT_SIGN_BIT = 1 << (_UINT_BITS - 1)
_POINTER_MASK = (1 << 64) - 1
_CHAR_MASK = 0xFF


def _as_int(value, directive):
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{directive} expects an integer, got {type(value).__name__}"
        ) from None


def format_char(value):
    """Render one character; an integer is taken as a byte value."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "%c") & _CHAR_MASK)


def format_string(value):
    """Render a string, stopping at the first NUL; None renders as '(null)'."""
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value.partition("\0")[0]


def format_signed(value):
    """Render a value as a signed 32-bit decimal integer."""
    number = _as_int(value, "%d") & _UINT_MASK
    if number & _INT_SIGN_BIT:
        number -= 1 << _UINT_BITS
    return str(number)


def format_unsigned(value):
    """Render a value as an unsigned 32-bit decimal integer."""
    return str(_as_int(value, "%u") & _UINT_MASK)


def format_hex(value, upper):
    """Render a value as unsigned 32-bit hexadecimal, in either letter case."""
    number = _as_int(value, "%X" if upper else "%x") & _UINT_MASK
    return format(number, "X" if upper else "x")


def format_pointer(address):
    """Render an address as '0x' plus lower-case hex; null renders as '(nil)'."""
    if address is None:
        return NULL_POINTER
    number = _as_int(address, "%p") & _POINTER_MASK
    if number == 0:
        return NULL_POINTER
    return f"{POINTER_PREFIX}{number:x}"