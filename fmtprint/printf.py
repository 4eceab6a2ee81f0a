"""The formatting entry points: ``sprintf`` and ``printf``."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TextIO

from fmtprint.numbers import format_hex, format_signed, format_unsigned
from fmtprint.spec import find_flag, find_precision, find_specs, find_width, spec_is_valid
from fmtprint.text import char_padding, format_char, format_pointer, format_string


class FormatError(ValueError):
    """Raised when a conversion spec in the format string cannot be formatted.

    ``partial`` holds the output produced before the bad spec, and ``spec``
    the spec itself.
    """

    def __init__(self, spec: str, partial: str = "") -> None:
        super().__init__(f"invalid conversion spec {spec!r}")
        self.spec = spec
        self.partial = partial


def format_percent(spec: str, args: Iterable[Any]) -> str:
    """Format a literal percent sign, padded like a single character."""
    args = iter(args)
    width = find_width(spec, args)
    find_precision(spec, args)
    pad, flag = char_padding(width, find_flag(spec))
    return "%" + pad if flag == "-" else pad + "%"


_DISPATCH: dict[str, Callable[[str, Iterator[Any]], str]] = {
    "s": format_string,
    "c": format_char,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda spec, args: format_hex(spec, args, False),
    "X": lambda spec, args: format_hex(spec, args, True),
    "p": format_pointer,
    "%": format_percent,
}


def format_conversion(spec: str, args: Iterable[Any]) -> str:
    """Format one spec according to its last character.

    A spec ending in no known conversion letter produces nothing.
    """
    if not spec:
        return ""
    handler = _DISPATCH.get(spec[-1])
    if handler is None:
        return ""
    return handler(spec, iter(args))


def _render(fmt: str, args: Iterator[Any]) -> str:
    specs = iter(find_specs(fmt))
    pieces: list[str] = []
    pos = 0
    length = len(fmt)
    while pos < length:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        pos = percent
        spec = next(specs, None)
        if spec is None:
            # A '%' that starts no spec is dropped.
            pos += 1
            continue
        if not spec_is_valid(spec):
            raise FormatError(spec, "".join(pieces))
        pieces.append(format_conversion(spec, args))
        pos += max(len(spec), 1)
    return "".join(pieces)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversion specs replaced by formatted ``args``.

    Raises :class:`FormatError` for a spec that ends in no conversion letter,
    and :class:`TypeError` when the arguments run out.
    """
    return _render(fmt, iter(args))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written. On a bad spec, the text
    produced before it is written and :class:`FormatError` is raised.
    """
    out = sys.stdout if file is None else file
    try:
        text = sprintf(fmt, *args)
    except FormatError as exc:
        out.write(exc.partial)
        raise
    out.write(text)
    return len(text)