import io

import pytest

from elfnm.output import (
    format_string,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


@pytest.mark.parametrize("spec", ["%d", "%i"])
@pytest.mark.parametrize("value", [0, 7, -42, 123456])
def test_signed_round_trip(spec, value):
    assert int(format_string(spec, value)) == value


def test_int_min_is_printed():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_string_conversion_inserts_argument():
    assert format_string("a%sb", "XYZ") == "aXYZb"


@pytest.mark.parametrize("value", ["A", 65])
def test_char_conversion(value):
    assert format_string("%c", value) == "A"


@pytest.mark.parametrize("value", [0, 1, 255, 48879, 4096])
def test_lower_hex_round_trip(value):
    text = format_string("%x", value)
    assert text == text.lower()
    assert int(text, 16) == value


@pytest.mark.parametrize("value", [10, 255, 48879])
def test_upper_hex_round_trip(value):
    text = format_string("%X", value)
    assert text == text.upper()
    assert int(text, 16) == value


def test_pointer_has_prefix():
    text = format_string("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_null_pointer():
    assert format_string("%p", None) == "0x0"


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 2**32 - 1


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_unknown_conversion_takes_no_argument():
    assert format_string("%q%d", 5) == "5"


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_string("abc%")


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_string("%d %d", 1)


def test_printf_writes_stdout_and_returns_length(capsys):
    count = printf("%s=%d\n", "x", 3)
    out = capsys.readouterr().out
    assert out == "x=3\n"
    assert count == len(out)


def test_put_char_writes_character():
    buf = io.StringIO()
    put_char("z", buf)
    put_char(ord("y"), buf)
    assert buf.getvalue() == "zy"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    put_str("abc", buf)
    assert buf.getvalue() == "abc"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("value", [0, 9, 10, -1, 2147483647, -2147483648])
def test_put_nbr_round_trip(value):
    buf = io.StringIO()
    put_nbr(value, buf)
    assert int(buf.getvalue()) == value


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())