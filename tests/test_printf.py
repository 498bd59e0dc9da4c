import io

import pytest

from ftfmt.conversions import format_hex, format_pointer, format_unsigned
from ftfmt.printf import FormatError, printf, render


def test_plain_text_unchanged():
    assert render("no directives here") == "no directives here"


def test_percent_escape():
    assert render("100%%") == "100%"


def test_char_and_string():
    assert render("Letter: %c", "a") == "Letter: a"
    assert render("String: %s", "hello") == "String: hello"


def test_null_string():
    assert render("%s", None) == "(null)"


def test_signed_directives_agree():
    assert render("%d", -255) == render("%i", -255) == "-255"


def test_unsigned_directive_uses_conversion():
    assert render("%u", -255) == format_unsigned(-255)


def test_hex_directives():
    assert render("%x", 255) == "ff"
    assert render("%X", 255) == "FF"
    assert render("%X", -255) == format_hex(-255, True)


def test_pointer_directive():
    assert render("%p", None) == "(nil)"
    assert render("%p", 0x1000) == format_pointer(0x1000)


def test_arguments_consumed_in_order():
    result = render("%s-%d-%c", "x", 3, "y")
    assert result == "x-3-y"


def test_extra_arguments_ignored():
    assert render("%d", 1, 2, 3) == render("%d", 1)


def test_none_template_raises():
    with pytest.raises(FormatError):
        render(None)


def test_non_string_template_raises():
    with pytest.raises(TypeError):
        render(b"bytes")


@pytest.mark.parametrize("template", ["hello%", "%q", "%5d", "%%%"])
def test_bad_directive_raises(template):
    with pytest.raises(FormatError):
        render(template, 1)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        render("%d and %d", 1)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        render("%z")


def test_printf_writes_to_stream_and_counts():
    stream = io.StringIO()
    count = printf("%s %d", "hello", -42, stream=stream)
    assert stream.getvalue() == render("%s %d", "hello", -42)
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("value: %x", 255)
    captured = capsys.readouterr().out
    assert captured == render("value: %x", 255)
    assert count == len(captured)


def test_printf_error_writes_nothing():
    stream = io.StringIO()
    with pytest.raises(FormatError):
        printf("abc%", stream=stream)
    assert stream.getvalue() == ""


def test_printf_none_template_raises():
    with pytest.raises(FormatError):
        printf(None, stream=io.StringIO())