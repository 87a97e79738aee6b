"""A small formatted printer.

It supports the conversions %c, %s, %p, %d, %i, %u, %x, %X and %%. Every
function writes to the given text stream, or to standard output, and
returns the number of characters written.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

from ftkit.output import put_char, put_str
from ftkit.text import itoa, strdup

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)
_PTR_MASK = (1 << 64) - 1

_NULL_TEXT = "(null)"
_NIL_TEXT = "(nil)"


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _to_int32(n: int) -> int:
    """Wrap n into the signed 32-bit range."""
    return ((_as_int(n) + _INT_SIGN) & _UINT_MASK) - _INT_SIGN


def _to_uint32(n: int) -> int:
    """Wrap n into the unsigned 32-bit range."""
    return _as_int(n) & _UINT_MASK


def _emit(text: str, stream: Optional[TextIO]) -> int:
    put_str(text, _stream(stream))
    return len(text)


def print_char(c: Union[str, int], stream: Optional[TextIO] = None) -> int:
    """Write one character; return 1."""
    put_char(c, _stream(stream))
    return 1


def print_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s up to its first NUL, or "(null)" for None; return the count."""
    if s is None:
        return _emit(_NULL_TEXT, stream)
    return _emit(strdup(s), stream)


def print_ptr(ptr: Any, stream: Optional[TextIO] = None) -> int:
    """Write an address as 0x followed by lowercase hex; return the count.

    An integer is taken as the address itself; any other object stands for
    its identity. None and 0 print as "(nil)".
    """
    if ptr is None:
        return _emit(_NIL_TEXT, stream)
    if isinstance(ptr, int) and not isinstance(ptr, bool):
        address = ptr & _PTR_MASK
    else:
        address = id(ptr) & _PTR_MASK
    if address == 0:
        return _emit(_NIL_TEXT, stream)
    return _emit(f"0x{address:x}", stream)


def print_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write n as a signed 32-bit decimal; return the count."""
    return _emit(itoa(_to_int32(n)), stream)


def print_unsigned(n: int, stream: Optional[TextIO] = None) -> int:
    """Write n as an unsigned 32-bit decimal; return the count."""
    return _emit(str(_to_uint32(n)), stream)


def print_hex(n: int, uppercase: bool = False, stream: Optional[TextIO] = None) -> int:
    """Write n as unsigned 32-bit hexadecimal; return the count."""
    spec = "X" if uppercase else "x"
    return _emit(format(_to_uint32(n), spec), stream)


def _next_argument(args: Iterator[Any], specifier: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{specifier}") from None


def dispatch(specifier: str, args: Iterator[Any], stream: Optional[TextIO] = None) -> int:
    """Print one conversion, taking its value from args when it needs one.

    Returns the number of characters written; an unknown specifier writes
    nothing, consumes no argument and returns 0.
    """
    if specifier == "%":
        return print_char("%", stream)
    if specifier == "c":
        return print_char(_next_argument(args, specifier), stream)
    if specifier == "s":
        return print_str(_next_argument(args, specifier), stream)
    if specifier == "p":
        return print_ptr(_next_argument(args, specifier), stream)
    if specifier in ("d", "i"):
        return print_nbr(_next_argument(args, specifier), stream)
    if specifier == "u":
        return print_unsigned(_next_argument(args, specifier), stream)
    if specifier == "x":
        return print_hex(_next_argument(args, specifier), False, stream)
    if specifier == "X":
        return print_hex(_next_argument(args, specifier), True, stream)
    return 0


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write fmt with its conversions filled from args; return the count.

    The format ends at its first NUL. A '%' as the last character is
    written as it is.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    values = iter(args)
    chars = iter(strdup(fmt))
    printed = 0
    for ch in chars:
        if ch == "%":
            specifier = next(chars, None)
            if specifier is not None:
                printed += dispatch(specifier, values, stream)
                continue
        printed += print_char(ch, stream)
    return printed