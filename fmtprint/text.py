"""Formatting of the ``s``, ``c`` and ``p`` conversions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from fmtprint.convert import to_pointer
from fmtprint.spec import find_flag, find_precision, find_width

NULL_STRING = "(null)"


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _fill(flag: str, count: int) -> str:
    return ("0" if flag == "0" else " ") * count


def _justify(body: str, pad: str, flag: str) -> str:
    return body + pad if flag == "-" else pad + body


def truncate_string(value: str | None, prec: int) -> str:
    """Apply a string precision; ``None`` is shown as ``(null)``."""
    if value is None:
        value = NULL_STRING
    if prec == 0:
        return ""
    if 0 < prec < len(value):
        return value[:prec]
    return value


def string_padding(width: int, value: str, flag: str) -> tuple[str, str]:
    """Return the padding that brings ``value`` up to ``width`` and the flag."""
    length = len(value)
    if 0 < width <= length:
        return "", flag
    if width < 0:
        width = -width
        flag = "-"
    if width <= length:
        return "", flag
    return _fill(flag, width - length), flag


def char_padding(width: int, flag: str) -> tuple[str, str]:
    """Return the padding for a single character and the flag.

    A width of exactly -1 gives no padding and leaves the flag alone.
    """
    if width == -1:
        return "", flag
    if width < 0:
        width = -width
        flag = "-"
    if width <= 1:
        return "", flag
    return _fill(flag, width - 1), flag


def pointer_padding(width: int, flag: str, value: str) -> tuple[str, str]:
    """Return the padding for a written address and the flag."""
    if width < -1:
        width = -width
        flag = "-"
    if width == -1 or width <= len(value):
        return "", flag
    return _fill(flag, width - len(value)), flag


def format_string(spec: str, args: Iterable[Any]) -> str:
    """Format the next argument as a string (``s``)."""
    args = iter(args)
    width = find_width(spec, args)
    prec = find_precision(spec, args)
    value = _next_arg(args)
    if value is not None and not isinstance(value, str):
        value = str(value)
    body = truncate_string(value, prec)
    pad, flag = string_padding(width, body, find_flag(spec))
    return _justify(body, pad, flag)


def format_char(spec: str, args: Iterable[Any]) -> str:
    """Format the next argument as one character (``c``).

    An integer is taken as a byte value; a NUL character is written as is.
    """
    args = iter(args)
    width = find_width(spec, args)
    find_precision(spec, args)
    value = _next_arg(args)
    if isinstance(value, int):
        char = chr(value & 0xFF)
    elif isinstance(value, str) and len(value) == 1:
        char = value
    else:
        raise TypeError("%c requires an integer or a single character")
    pad, flag = char_padding(width, find_flag(spec))
    return _justify(char, pad, flag)


def format_pointer(spec: str, args: Iterable[Any]) -> str:
    """Format the next argument as an address (``p``).

    An integer is used as the address, ``None`` as 0, and any other object
    by its identity.
    """
    args = iter(args)
    width = find_width(spec, args)
    find_precision(spec, args)
    value = _next_arg(args)
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    body = to_pointer(address)
    pad, flag = pointer_padding(width, find_flag(spec), body)
    return _justify(body, pad, flag)