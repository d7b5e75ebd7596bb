import io

import pytest

from fractoscope.printf import dprintf, printf, sprintf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%i", (-3,)),
        ("%5d", (-7,)),
        ("%-5d|", (3,)),
        ("%05d", (42,)),
        ("%.3d", (7,)),
        ("%+d", (5,)),
        ("% d", (5,)),
        ("%u", (42,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%s", ("abc",)),
        ("%10s", ("abc",)),
        ("%-10s|", ("abc",)),
        ("%.2s", ("abc",)),
        ("%c", (65,)),
        ("%3c", (66,)),
        ("%d and %s", (1, "x")),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert sprintf(fmt, *args) == fmt % args


def test_plain_text_is_unchanged():
    assert sprintf("hello world") == "hello world"


def test_double_percent():
    assert sprintf("100%%") == "100%"


def test_unsigned_wraps_negative():
    assert sprintf("%u", -1) == "%u" % 0xFFFFFFFF


def test_unknown_conversion_is_left_as_text():
    assert sprintf("a%qb") == "aqb"


def test_trailing_percent_is_dropped():
    assert sprintf("end%") == "end"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_pointer_values():
    assert sprintf("%p", 0) == "(nil)"
    assert sprintf("%p", 255) == "%#x" % 255


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_dprintf_writes_to_stream():
    stream = io.StringIO()
    count = dprintf(stream, "x=%d y=%s", 3, "z")
    assert stream.getvalue() == sprintf("x=%d y=%s", 3, "z")
    assert count == len(stream.getvalue())


def test_printf_writes_to_stdout(capsys):
    count = printf("[R]ender: %u us\n", 12)
    out = capsys.readouterr().out
    assert out == "[R]ender: %u us\n" % 12
    assert count == len(out)