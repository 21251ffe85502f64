# topmark:header:start
#
#   project      : Nestprint
#   file         : test_span.py
#   file_relpath : tests/test_span.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `PointerSpan`, the explicit (pointer, count) view."""

from __future__ import annotations

import ctypes

import pytest

from nestprint import PointerSpan, render


def _eight_ints() -> ctypes.Array[ctypes.c_int]:
    return (ctypes.c_int * 8)(1, 2, 3, 4, 5, 6, 7, 8)


def test_doubling_through_the_span_writes_the_underlying_memory() -> None:
    """Writes through the span land in the original buffer and render doubled."""
    buffer = _eight_ints()
    span = PointerSpan(ctypes.cast(buffer, ctypes.POINTER(ctypes.c_int)), 8)

    for i in range(len(span)):
        span[i] *= 2

    assert list(buffer) == [2, 4, 6, 8, 10, 12, 14, 16]
    assert render(span) == "[ 2 4 6 8 10 12 14 16 ]"


def test_array_is_accepted_as_pointer_source() -> None:
    """A ctypes array converts to a pointer to its first element."""
    buffer = _eight_ints()
    span = PointerSpan(buffer, 3)
    assert list(span) == [1, 2, 3]
    assert span.element_type is ctypes.c_int


def test_count_limits_the_view() -> None:
    """Only `count` elements are visible; an empty span renders as '[ ]'."""
    buffer = _eight_ints()
    assert render(PointerSpan(buffer, 2)) == "[ 1 2 ]"
    assert render(PointerSpan(buffer, 0)) == "[ ]"


def test_slicing_returns_a_list() -> None:
    """Slices stay within the span."""
    span = PointerSpan(_eight_ints(), 4)
    assert span[1:3] == [2, 3]
    assert span[:] == [1, 2, 3, 4]


def test_begin_and_end_markers() -> None:
    """`end()` points one element past the last element of the span."""
    buffer = _eight_ints()
    span = PointerSpan(buffer, 5)

    begin_addr = ctypes.cast(span.begin(), ctypes.c_void_p).value
    end_addr = ctypes.cast(span.end(), ctypes.c_void_p).value

    assert begin_addr == ctypes.addressof(buffer)
    assert end_addr == ctypes.addressof(buffer) + 5 * ctypes.sizeof(ctypes.c_int)


@pytest.mark.parametrize("bad", [[1, 2], 3, None, ctypes.c_int(1)])
def test_rejects_non_pointers(bad: object) -> None:
    """Only ctypes pointers and arrays can back a span."""
    with pytest.raises(TypeError, match="ctypes pointer or array"):
        PointerSpan(bad, 1)


def test_rejects_invalid_counts() -> None:
    """Counts must be non-negative integers."""
    buffer = _eight_ints()
    with pytest.raises(ValueError, match=">= 0"):
        PointerSpan(buffer, -1)
    with pytest.raises(TypeError, match="count must be an int"):
        PointerSpan(buffer, 2.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="count must be an int"):
        PointerSpan(buffer, True)


def test_repr() -> None:
    """The repr names the element type and the count."""
    assert repr(PointerSpan(_eight_ints(), 8)) == "PointerSpan(c_int*, count=8)"


def test_bare_pointer_is_not_renderable() -> None:
    """A raw pointer has no count and is rejected with a hint to wrap it."""
    pointer = ctypes.cast(_eight_ints(), ctypes.POINTER(ctypes.c_int))
    with pytest.raises(TypeError, match="raw pointer") as excinfo:
        render(pointer)
    assert "PointerSpan" in str(excinfo.value.hint)  # type: ignore[attr-defined]
