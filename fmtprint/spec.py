"""Splitting a format string into conversion specs and reading their fields."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from fmtprint.strutil import atoi

SPEC_CHARS = "-0123456789.*"
CONVERSION_CHARS = "cspdiuxX" + SPEC_CHARS
VALID_ENDINGS = "csdiuxXp%"


def _is_one_of(c: str, charset: str) -> bool:
    return len(c) == 1 and c in charset


def is_spec_char(c: str) -> bool:
    """Tell whether ``c`` may appear between ``%`` and the conversion letter."""
    return _is_one_of(c, SPEC_CHARS)


def is_conversion_char(c: str) -> bool:
    """Tell whether ``c`` is a conversion letter or a spec character."""
    return _is_one_of(c, CONVERSION_CHARS)


def find_specs(text: str) -> list[str]:
    """Return the conversion specs of ``text`` in order of appearance.

    A spec is ``%%``, or ``%`` followed by any spec characters and at most
    one conversion letter. A ``%`` at the very end of ``text`` starts no spec.
    """
    specs: list[str] = []
    length = len(text)
    i = 1
    while i < length:
        if text[i - 1] == "%":
            end = i
            if text[end] == "%":
                end += 1
            else:
                while end < length and is_spec_char(text[end]):
                    end += 1
                if end < length and is_conversion_char(text[end]):
                    end += 1
            specs.append(text[i - 1:end])
            i = end
        i += 1
    return specs


def spec_is_valid(spec: str | None) -> bool:
    """Tell whether a spec found by :func:`find_specs` can be formatted.

    A spec whose second character is no conversion character (as in ``%%``
    or a lone ``%``) is accepted; otherwise the spec must end in one of
    ``csdiuxXp%``.
    """
    if not spec:
        return False
    if spec[0] == "%" and (len(spec) < 2 or not is_conversion_char(spec[1])):
        return True
    return spec[-1] in VALID_ENDINGS


def find_flag(spec: str | None) -> str:
    """Return ``'-'`` for left alignment, ``'0'`` for zero padding, else ``''``.

    ``-`` anywhere wins. A ``0`` counts as a flag only when the character
    before it is not itself a spec or conversion character.
    """
    if not spec:
        return ""
    minus = False
    zero = False
    for index, char in enumerate(spec):
        if char == "-":
            minus = True
        elif char == "0":
            previous = spec[index - 1] if index > 0 else ""
            if not is_conversion_char(previous):
                zero = True
    if minus:
        return "-"
    if zero:
        return "0"
    return ""


def _next_int(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    value = int(value) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _scan_number(segment: str, args: Iterator[Any]) -> int:
    """Read the last number or ``*`` in ``segment``; ``*`` takes an argument."""
    value = 0
    i = 0
    length = len(segment)
    while i < length:
        char = segment[i]
        if char == "*":
            value = _next_int(args)
            i += 1
        elif char.isdigit() and char in "123456789":
            start = i
            while i < length and segment[i] in "0123456789":
                i += 1
            value = atoi(segment[start:i])
        else:
            i += 1
    return value


def find_width(spec: str, args: Iterator[Any]) -> int:
    """Return the field width of ``spec``, 0 if none is given.

    ``args`` is an iterator over the remaining arguments; a ``*`` width
    consumes one of them.
    """
    dot = spec.find(".")
    return _scan_number(spec if dot < 0 else spec[:dot], args)


def find_precision(spec: str | None, args: Iterator[Any]) -> int:
    """Return the precision of ``spec``: -1 without a ``.``, 0 for a bare ``.``.

    A ``*`` precision consumes one argument from ``args``.
    """
    if spec is None:
        return 0
    dot = spec.find(".")
    if dot < 0:
        return -1
    return _scan_number(spec[dot:], args)