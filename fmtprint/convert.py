"""Integer to text conversions used by the formatter."""

from __future__ import annotations

_UINT32_SPAN = 4294967295 + 1
_UINT64_MASK = (1 << 64) - 1


def numlen(nb: int, base: int) -> int:
    """Return the number of characters needed to write ``nb`` in ``base``.

    A leading minus sign is counted for negative numbers. Bases outside
    1..16 yield 0; base 1 has no finite positional form and is rejected.
    """
    if base < 1 or base > 16:
        return 0
    if base == 1:
        raise ValueError("base 1 has no positional representation")
    if nb == 0:
        return 1
    length = 1 if nb < 0 else 0
    magnitude = abs(nb)
    while magnitude:
        magnitude //= base
        length += 1
    return length


def wrap_unsigned(nb: int) -> int:
    """Reinterpret a negative 32-bit value as its unsigned counterpart."""
    if nb < 0:
        return nb + _UINT32_SPAN
    return nb


def to_decimal(nb: int) -> str:
    """Write a signed integer in base 10."""
    return str(nb)


def to_unsigned(nb: int) -> str:
    """Write an integer in base 10 as an unsigned 32-bit value."""
    return str(wrap_unsigned(nb))


def to_hex(nb: int, upper: bool = False) -> str:
    """Write an integer in base 16 as an unsigned 32-bit value."""
    return format(wrap_unsigned(nb), "X" if upper else "x")


def to_pointer(nb: int) -> str:
    """Write an address as ``0x`` followed by lower-case hex digits."""
    return "0x" + format(nb & _UINT64_MASK, "x")