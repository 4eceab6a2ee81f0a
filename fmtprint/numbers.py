"""Formatting of the integer conversions ``d``, ``i``, ``u``, ``x`` and ``X``."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from fmtprint.convert import to_decimal, to_hex, to_unsigned
from fmtprint.spec import find_flag, find_precision, find_width

_DIGITS = "0123456789"


def _next_int(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    value = int(value) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def apply_zero_precision(digits: str, prec: int) -> str:
    """Drop a zero value entirely when the precision is exactly 0."""
    if prec == 0 and digits.startswith("0"):
        return ""
    return digits


def precision_padding(prec: int, digits: str, flag: str) -> tuple[str, str]:
    """Return the zeros that bring ``digits`` up to ``prec`` and the adjusted flag.

    A negative number gets one extra zero, which :func:`move_sign` later
    swaps with the minus sign.
    """
    length = len(digits)
    if prec < 0 or 0 < prec < length:
        return "", flag
    if prec == 0 and flag == "0":
        flag = ""
    elif prec > length:
        flag = "0"
    negative = "-" in digits
    count = prec - length + (1 if negative else 0)
    if count <= 0:
        return "", flag
    fill = "0" if flag == "0" or negative else " "
    return fill * count, flag


def width_padding(width: int, digits: str, flag: str, prec: int) -> tuple[str, str]:
    """Return the padding that brings ``digits`` up to ``width`` and the flag.

    A negative width means left alignment. Zeros are used only when the
    ``0`` flag is set and no precision is given.
    """
    if width < 0:
        width = -width
        flag = "-"
    length = len(digits)
    if width <= length or prec > width:
        return "", flag
    count = width - length
    if prec > length:
        count += prec - length
    fill = "0" if prec < 0 and flag == "0" else " "
    return fill * count, flag


def move_sign(text: str) -> str:
    """Move a minus sign in front of the zeros that pad a negative number."""
    minus = text.find("-")
    if minus < 0 or len(text) < 3:
        return text
    zero = text.find("0")
    if zero < 0:
        return text
    if zero > 0 and text[zero - 1] in _DIGITS:
        return text
    chars = list(text)
    chars[minus] = "0"
    chars[zero] = "-"
    return "".join(chars)


def _format_number(spec: str, args: Iterable[Any], convert: Callable[[int], str]) -> str:
    args = iter(args)
    width = find_width(spec, args)
    prec = find_precision(spec, args)
    digits = apply_zero_precision(convert(_next_int(args)), prec)
    pad, _ = precision_padding(prec, digits, find_flag(spec))
    digits = pad + digits
    pad, flag = width_padding(width, digits, find_flag(spec), prec)
    digits = digits + pad if flag == "-" else pad + digits
    return move_sign(digits)


def format_signed(spec: str, args: Iterable[Any]) -> str:
    """Format the next argument as a signed 32-bit decimal (``d``/``i``)."""
    return _format_number(spec, args, to_decimal)


def format_unsigned(spec: str, args: Iterable[Any]) -> str:
    """Format the next argument as an unsigned 32-bit decimal (``u``)."""
    return _format_number(spec, args, to_unsigned)


def format_hex(spec: str, args: Iterable[Any], upper: bool = False) -> str:
    """Format the next argument as unsigned 32-bit hexadecimal (``x``/``X``)."""
    return _format_number(spec, args, lambda nb: to_hex(nb, upper))