"""Writing characters, strings and numbers to a text stream.

The stream defaults to standard output.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftkit.text import strdup


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer code is truncated to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected a single character or an integer code, got bool")
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif not isinstance(c, str):
        raise TypeError(f"expected a single character or an integer code, got {type(c).__name__}")
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    _stream(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s up to its first NUL; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(strdup(s))


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; None writes nothing at all."""
    if s is None:
        return
    _stream(stream).write(strdup(s) + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _stream(stream).write(str(n))