import pytest

from fmtprint.strutil import (
    atoi,
    itoa,
    split,
    strlcat,
    strlcpy,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  -42abc", -42), ("\t\n+17", 17), ("abc", 0), ("", 0), ("--5", 0)],
)
def test_atoi_basic(text, expected):
    assert atoi(text) == expected


def test_atoi_int_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_long_overflow():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_fields():
    assert split(",,a,,b,c,,", ",") == ["a", "b", "c"]


def test_split_empty_and_none():
    assert split("", ",") == []
    assert split(None, ",") == []
    assert split(",,,", ",") == []


def test_split_join_invariant():
    text = "one two  three"
    assert " ".join(split(text, " ")) == "one two three"


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", None) == "  keep  "
    assert strtrim(None, "x") is None


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 2, 100) == "llo"
    assert substr(None, 0, 3) == ""


def test_strnstr_found_is_a_match():
    haystack = "find the needle here"
    index = strnstr(haystack, "needle", len(haystack))
    assert haystack[index:index + len("needle")] == "needle"


def test_strnstr_limited_by_length():
    haystack = "abcdef"
    assert strnstr(haystack, "def", 5) is None
    assert strnstr(haystack, "def", 6) == haystack.find("def")
    assert strnstr(haystack, "", 0) == 0
    assert strnstr(haystack, "xyz", 6) is None


def test_strncmp():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("x", "y", 0) == 0


def test_strlcat_fits():
    assert strlcat("foo", "bar", 10) == ("foobar", 6)


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert result == "foob"
    assert total == len("foo") + len("bar")


def test_strlcat_no_room():
    assert strlcat("foo", "bar", 2) == ("foo", 2 + len("bar"))


def test_strlcpy():
    assert strlcpy("hello", 10) == ("hello", 5)
    assert strlcpy("hello", 3) == ("he", 5)
    assert strlcpy("hello", 0) == ("", 5)
    assert strlcpy(None, 4) == ("", 0)