import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.printf import (
    dispatch,
    print_char,
    print_hex,
    print_nbr,
    print_ptr,
    print_str,
    print_unsigned,
    printf,
)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1


def test_print_str_none_prints_null():
    stream = io.StringIO()
    count = print_str(None, stream=stream)
    assert stream.getvalue() == "(null)"
    assert count == 6


def test_print_str_stops_at_nul():
    stream = io.StringIO()
    count = print_str("ab\0cd", stream=stream)
    out = stream.getvalue()
    assert out == "ab"
    assert count == len(out)


@pytest.mark.parametrize("ptr", [None, 0])
def test_print_ptr_nil(ptr):
    stream = io.StringIO()
    count = print_ptr(ptr, stream=stream)
    assert stream.getvalue() == "(nil)"
    assert count == 5


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_print_ptr_round_trip(address):
    stream = io.StringIO()
    count = print_ptr(address, stream=stream)
    out = stream.getvalue()
    assert out.startswith("0x")
    assert int(out[2:], 16) == address
    assert out == out.lower()
    assert count == len(out)


def test_print_ptr_object_uses_hex_address():
    obj = object()
    stream = io.StringIO()
    count = print_ptr(obj, stream=stream)
    out = stream.getvalue()
    assert out.startswith("0x")
    assert int(out[2:], 16) > 0
    assert count == len(out)


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_print_nbr_matches_decimal(n):
    stream = io.StringIO()
    count = print_nbr(n, stream=stream)
    out = stream.getvalue()
    assert out == str(n)
    assert count == len(out)


def test_print_nbr_wraps_to_int32():
    stream = io.StringIO()
    print_nbr(INT_MAX + 1, stream=stream)
    assert int(stream.getvalue()) == INT_MIN


def test_print_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        print_nbr("12", stream=io.StringIO())


@given(st.integers(min_value=0, max_value=UINT_MAX))
def test_print_unsigned_round_trip(n):
    stream = io.StringIO()
    count = print_unsigned(n, stream=stream)
    out = stream.getvalue()
    assert int(out) == n
    assert count == len(out)


def test_print_unsigned_wraps_negative():
    stream = io.StringIO()
    print_unsigned(-1, stream=stream)
    assert int(stream.getvalue()) == UINT_MAX


@given(st.integers(min_value=0, max_value=UINT_MAX), st.booleans())
def test_print_hex_round_trip(n, uppercase):
    stream = io.StringIO()
    count = print_hex(n, uppercase, stream=stream)
    out = stream.getvalue()
    assert int(out, 16) == n
    assert out == (out.upper() if uppercase else out.lower())
    assert count == len(out)


def test_print_char_truncates_code():
    stream = io.StringIO()
    count = print_char(ord("A") + 256, stream=stream)
    assert stream.getvalue() == "A"
    assert count == 1


def test_dispatch_consumes_one_argument():
    values = iter([5, 9])
    stream = io.StringIO()
    count = dispatch("d", values, stream)
    assert stream.getvalue() == "5"
    assert count == 1
    assert next(values) == 9


def test_dispatch_unknown_specifier_writes_nothing():
    values = iter([5])
    stream = io.StringIO()
    assert dispatch("q", values, stream) == 0
    assert stream.getvalue() == ""
    assert next(values) == 5


def test_dispatch_percent_needs_no_argument():
    stream = io.StringIO()
    assert dispatch("%", iter([]), stream) == 1
    assert stream.getvalue() == "%"


@given(st.text(alphabet=st.characters(blacklist_characters="%\0", max_codepoint=0x7F)))
def test_printf_plain_text_is_copied(text):
    stream = io.StringIO()
    count = printf(text, stream=stream)
    assert stream.getvalue() == text
    assert count == len(text)


def test_printf_trailing_percent_is_literal():
    stream = io.StringIO()
    count = printf("abc%", stream=stream)
    assert stream.getvalue() == "abc%"
    assert count == 4


def test_printf_unknown_specifier_is_dropped():
    stream = io.StringIO()
    count = printf("a%qb", stream=stream)
    assert stream.getvalue() == "ab"
    assert count == 2


def test_printf_mixed_conversions():
    stream = io.StringIO()
    count = printf("%c%s%d", "A", "bc", 7, stream=stream)
    out = stream.getvalue()
    assert out == "Abc7"
    assert count == len(out)


def test_printf_stops_at_nul():
    stream = io.StringIO()
    count = printf("ab\0cd", stream=stream)
    assert stream.getvalue() == "ab"
    assert count == 2


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX), st.integers(min_value=0, max_value=UINT_MAX))
def test_printf_count_matches_output(signed, unsigned):
    stream = io.StringIO()
    count = printf("[%i|%u|%x|%X]", signed, unsigned, unsigned, unsigned, stream=stream)
    out = stream.getvalue()
    assert count == len(out)
    parts = out[1:-1].split("|")
    assert int(parts[0]) == signed
    assert int(parts[1]) == unsigned
    assert int(parts[2], 16) == unsigned
    assert int(parts[3], 16) == unsigned


def test_printf_none_format_raises():
    with pytest.raises(TypeError):
        printf(None, stream=io.StringIO())


def test_printf_missing_argument_raises():
    with pytest.raises(TypeError):
        printf("%d %d", 1, stream=io.StringIO())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "hi")
    assert capsys.readouterr().out == "hi"
    assert count == 2