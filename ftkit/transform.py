"""String building and reshaping: substrings, joins, trims, splits and maps.

Like the rest of the package, strings end at their first NUL character.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

from ftkit.text import strdup

_NUL = "\0"


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"{name} must be a single character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {len(c)} characters")
    return c


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start.

    A start at or past the end of s gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """s1 followed by s2.

    A missing (None) operand counts as empty; when both are missing the
    result is None.
    """
    if s1 is None and s2 is None:
        return None
    return strdup(s1 or "") + strdup(s2 or "")


def strtrim(s: str, charset: str) -> str:
    """s without the characters of charset at its start and end."""
    return strdup(s).strip(strdup(charset))


def split(s: str, sep: str) -> List[str]:
    """The non-empty pieces of s between occurrences of sep."""
    _single_char(sep, "sep")
    text = strdup(s)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of f(index, char) for every character of s.

    If f produces a NUL, the result ends there.
    """
    mapped = "".join(f(index, char) for index, char in enumerate(strdup(s)))
    return strdup(mapped)


def striteri(s: MutableSequence[str], f: Callable[[int, str], str]) -> MutableSequence[str]:
    """Replace each character of s in place with f(index, char).

    s is a mutable sequence of single characters; processing stops at the
    first NUL element. Returns s.
    """
    for index, char in enumerate(s):
        if char == _NUL:
            break
        s[index] = _single_char(f(index, char), "replacement")
    return s