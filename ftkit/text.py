"""String helpers that follow NUL-terminated string rules.

A string ends at its first NUL character ("\\0"), if it has one; anything
after it is ignored. Search functions return an index into the string, or
None when nothing is found.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"
_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _terminated(s: str) -> str:
    """The part of s before its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _target(c: CharLike) -> str:
    """The character searched for; integer codes are truncated to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected a single character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a single character or an integer code, got {type(c).__name__}")


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace (tab, newline, vertical tab, form feed, carriage
    return, space) is skipped, then one optional sign, then ASCII digits.
    Parsing stops at the first other character; no digits gives 0.
    """
    match = _ATOI_PATTERN.match(_terminated(s))
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Decimal text of n, with a leading '-' for negative numbers."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first c in s, or None.

    Searching for NUL finds the terminator, at index strlen(s).
    """
    text = _terminated(s)
    target = _target(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last c in s, or None.

    Searching for NUL finds the terminator, at index strlen(s).
    """
    text = _terminated(s)
    target = _target(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the character codes at the first mismatch,
    a shorter string comparing as if followed by NUL, or 0 if equal.
    """
    _check_size(n, "n")
    first = _terminated(s1)[:n]
    second = _terminated(s2)[:n]
    for a, b in zip_longest(first, second, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    wanted = _terminated(needle)
    if not wanted:
        return 0
    index = _terminated(haystack)[:length].find(wanted)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters; empty when size
    is 0) and the full length of src, so truncation shows as a length at
    least size.
    """
    _check_size(size, "size")
    text = _terminated(src)
    copied = text[:size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst in a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create: the
    length of dst, capped at size, plus the length of src. When dst
    already fills the buffer it comes back unchanged.
    """
    _check_size(size, "size")
    head = _terminated(dst)
    tail = _terminated(src)
    dst_len = min(len(head), size)
    if dst_len < size:
        result = head + tail[:size - dst_len - 1]
    else:
        result = head
    return result, dst_len + len(tail)


def strdup(s: str) -> str:
    """A copy of s up to its first NUL."""
    return _terminated(s)