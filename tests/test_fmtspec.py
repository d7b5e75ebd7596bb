import pytest

from fractoscope.fmtspec import FormatSpec, Padding, pad, parse_spec


def test_empty_spec_is_default():
    spec, pos = parse_spec("d", 0)
    assert spec == FormatSpec()
    assert pos == 0
    assert spec.padding is Padding.LEFT


def test_minus_and_width():
    spec, pos = parse_spec("-5d", 0)
    assert spec.padding is Padding.RIGHT
    assert spec.width == 5
    assert pos == 2


def test_zero_flag():
    spec, pos = parse_spec("05d", 0)
    assert spec.padding is Padding.ZEROS
    assert spec.width == 5
    assert pos == 2


def test_precision_resets_zero_padding():
    spec, pos = parse_spec("08.3d", 0)
    assert spec.padding is Padding.LEFT
    assert spec.width == 8
    assert spec.precision == 3
    assert spec.has_precision is True
    assert pos == 4


def test_dot_without_digits_gives_zero_precision():
    spec, pos = parse_spec(".s", 0)
    assert spec.has_precision is True
    assert spec.precision == 0
    assert pos == 1


def test_sign_space_and_alternate_flags():
    spec, pos = parse_spec("#+ x", 0)
    assert spec.alternate_form is True
    assert spec.force_sign is True
    assert spec.has_space is True
    assert pos == 3


def test_zero_after_minus_is_swallowed():
    spec, pos = parse_spec("-0#x", 0)
    assert spec.padding is Padding.RIGHT
    assert spec.alternate_form is False
    assert pos == 2


def test_zero_after_minus_still_sees_next_sign_flag():
    spec, pos = parse_spec("-0+d", 0)
    assert spec.padding is Padding.RIGHT
    assert spec.force_sign is True
    assert pos == 3


def test_parse_from_offset():
    spec, pos = parse_spec("%12d", 1)
    assert spec.width == 12
    assert pos == 3


def test_parse_at_end_of_text():
    spec, pos = parse_spec("abc", 3)
    assert spec == FormatSpec()
    assert pos == 3


@pytest.mark.parametrize("width", [0, 1, 4, 9])
def test_pad_length(width):
    assert pad("x", width) == "x" * width


def test_pad_negative_width_is_empty():
    assert pad(" ", -3) == ""