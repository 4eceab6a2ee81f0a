"""String helpers with the semantics of classic C string routines."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_LLONG_MAX = (1 << 63) - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Values overflowing a 64-bit accumulator give -1 (positive) or 0
    (negative); other values are truncated to 32 bits.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
        if result > _LLONG_MAX:
            return -1 if sign == 1 else 0
    return _to_int32(_to_int32(result) * sign)


def itoa(n: int) -> str:
    """Write a 32-bit integer in base 10."""
    return str(_to_int32(n))


def split(text: str | None, sep: str) -> list[str]:
    """Split on a separator character, dropping empty fields."""
    if not text:
        return []
    if sep in ("", "\0"):
        return [text]
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str | None, charset: str | None) -> str | None:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if text is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str | None, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``."""
    if text is None or start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the match, or None.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    for i in range(n):
        c1 = ord(s1[i]) if i < len(s1) else 0
        c2 = ord(s2[i]) if i < len(s2) else 0
        if c1 != c2 or c1 == 0:
            return c1 - c2
    return 0


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``dstsize`` slots.

    Returns the resulting string and the length the full result would have.
    """
    dst_len = min(len(dst), dstsize)
    if dst_len == dstsize:
        return dst, dstsize + len(src)
    room = dstsize - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strlcpy(src: str | None, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` slots.

    Returns the copied string and the length of ``src``.
    """
    full = len(src) if src else 0
    if dstsize == 0 or src is None:
        return "", full
    return src[:dstsize - 1], full