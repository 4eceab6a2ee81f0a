import pytest

from fmtprint.numbers import (
    apply_zero_precision,
    format_hex,
    format_signed,
    format_unsigned,
    move_sign,
    precision_padding,
    width_padding,
)


@pytest.mark.parametrize(
    "spec, value",
    [("%u", 7), ("%10u", 123), ("%-10u", 123), ("%.4u", 9)],
)
def test_format_unsigned_matches_printf(spec, value):
    assert format_unsigned(spec, iter([value])) == spec % value


def test_format_unsigned_wraps_negative():
    assert format_unsigned("%u", iter([-1])) == "%u" % 0xFFFFFFFF


@pytest.mark.parametrize(
    "spec, value",
    [("%x", 255), ("%8x", 255), ("%-8.3x", 10), ("%08x", 48879), ("%.6x", 1)],
)
def test_format_hex_lower(spec, value):
    assert format_hex(spec, iter([value]), False) == spec % value


def test_format_hex_upper_negative_wraps():
    assert format_hex("%X", iter([-1]), True) == "%X" % 0xFFFFFFFF


def test_zero_with_zero_precision_is_empty():
    assert format_signed("%.0d", iter([0])) == ""
    assert format_hex("%.0x", iter([0]), False) == ""


def test_zero_precision_zero_keeps_width():
    result = format_signed("%5.0d", iter([0]))
    assert len(result) == 5
    assert set(result) == {" "}


def test_arguments_are_consumed_in_order():
    args = iter([4, 2, 99])
    assert format_signed("%*.*d", args) == "%*.*d" % (4, 2, 99)
    assert list(args) == []


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_signed("%d", iter([]))


def test_apply_zero_precision():
    assert apply_zero_precision("0", 0) == ""
    assert apply_zero_precision("0", -1) == "0"
    assert apply_zero_precision("-5", 0) == "-5"


def test_precision_padding_no_precision():
    assert precision_padding(-1, "42", "0") == ("", "0")
    assert precision_padding(1, "42", "") == ("", "")


def test_precision_padding_fills_with_zeros():
    pad, flag = precision_padding(5, "42", "")
    assert flag == "0"
    assert set(pad) == {"0"}
    assert len(pad + "42") == 5


def test_precision_padding_negative_gets_extra_zero():
    pad, _ = precision_padding(3, "-42", "")
    assert move_sign(pad + "-42") == "%.3d" % -42


def test_width_padding_negative_width_left_aligns():
    pad, flag = width_padding(-6, "42", "", -1)
    assert flag == "-"
    assert set(pad) == {" "}
    assert len(pad) + len("42") == 6


def test_width_padding_not_needed():
    assert width_padding(2, "42", "", -1) == ("", "")


def test_width_padding_zero_only_without_precision():
    pad, _ = width_padding(6, "42", "0", -1)
    assert set(pad) == {"0"}
    pad, _ = width_padding(6, "42", "0", 2)
    assert set(pad) == {" "}


@pytest.mark.parametrize("text", ["42", "-5", "-102", "   -42"])
def test_move_sign_leaves_plain_text(text):
    assert move_sign(text) == text


def test_move_sign_swaps_leading_zeros():
    assert move_sign("000-42") == "%06d" % -42
    assert move_sign("   0-5") == "%6.2d" % -5