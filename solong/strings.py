"""String helpers used when reading and validating maps."""

from __future__ import annotations

from itertools import takewhile, zip_longest

_BLANKS = " \t\n\v\f\r"
_DIGITS = "0123456789"
_MAX_DIGITS = 20


def _wrap32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    return (value + 2**31) % 2**32 - 2**31


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading signed decimal integer the way the C library does.

    Leading blanks are skipped and one optional sign is accepted.  A run of
    twenty or more digits yields -1 for a positive number and 0 for a
    negative one.  Other overflows wrap to the signed 32-bit range.
    """
    body = text.lstrip(_BLANKS)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, body))
    if len(digits) >= _MAX_DIGITS:
        return -1 if sign > 0 else 0
    return _wrap32(int(digits or "0") * sign)


def itoa(number: int) -> str:
    """Return the decimal text of an integer."""
    return f"{number:d}"


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` within the first ``limit`` characters of ``haystack``.

    Returns the index of the first match, or None.  An empty needle
    matches at index 0.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strncmp(first: str, second: str, size: int) -> int:
    """Compare at most ``size`` characters; the sign gives the ordering."""
    if size <= 0:
        return 0
    pairs = zip_longest(first[:size], second[:size], fillvalue="\0")
    for left, right in pairs:
        if left != right or left == "\0":
            return ord(left) - ord(right)
    return 0


def count_occurrences(text: str, char: str) -> int:
    """Count how many times ``char`` appears in ``text``."""
    return text.count(char)