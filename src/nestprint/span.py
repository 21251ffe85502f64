# topmark:header:start
#
#   project      : Nestprint
#   file         : span.py
#   file_relpath : src/nestprint/span.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Non-owning (pointer, count) spans over raw ``ctypes`` memory.

A ``ctypes`` pointer carries no length, so Nestprint refuses to render one.
[`PointerSpan`][nestprint.span.PointerSpan] pairs a pointer with an explicit
element count supplied by the caller and exposes the result as an ordinary
sequence: it can be iterated, indexed, written through, and rendered as
``"[ ... ]"``.

Warning:
    The span performs **no** bounds checking and owns nothing. The caller
    guarantees that the pointer addresses at least ``count`` contiguous
    elements, and that this memory stays alive and correctly sized while the
    span is used. Reading or writing past ``count`` reads or writes arbitrary
    memory.

Example:
    ```python
    import ctypes

    eight = (ctypes.c_int * 8)(1, 2, 3, 4, 5, 6, 7, 8)
    span = PointerSpan(ctypes.cast(eight, ctypes.POINTER(ctypes.c_int)), 8)
    for i in range(len(span)):
        span[i] *= 2
    assert list(eight) == [2, 4, 6, 8, 10, 12, 14, 16]
    ```
"""

from __future__ import annotations

import ctypes
from typing import TYPE_CHECKING, Any, overload

if TYPE_CHECKING:
    from collections.abc import Iterator


class PointerSpan:
    """Explicit, non-owning view of ``count`` elements starting at ``pointer``.

    Args:
        pointer (Any): A ``ctypes`` pointer instance (``ctypes.POINTER(T)``), or a
            ``ctypes`` array, which is converted to a pointer to its first element.
        count (int): Number of elements addressed by the span.

    Raises:
        TypeError: If ``pointer`` is neither a ``ctypes`` pointer nor a ``ctypes``
            array, or ``count`` is not an integer.
        ValueError: If ``count`` is negative.
    """

    __slots__ = ("_pointer", "_count")

    def __init__(self, pointer: Any, count: int) -> None:
        if isinstance(pointer, ctypes.Array):
            pointer = ctypes.cast(pointer, ctypes.POINTER(pointer._type_))
        if not isinstance(pointer, ctypes._Pointer):
            raise TypeError(
                f"PointerSpan expects a ctypes pointer or array, got {type(pointer).__name__}"
            )
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {type(count).__name__}")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._pointer = pointer
        self._count = count

    @property
    def pointer(self) -> Any:
        """The (non-owned) pointer to the first element."""
        return self._pointer

    @property
    def element_type(self) -> type:
        """The ``ctypes`` type of the addressed elements."""
        return type(self._pointer)._type_

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        pointer = self._pointer
        for i in range(self._count):
            yield pointer[i]

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return [self._pointer[i] for i in range(self._count)[index]]
        # Unchecked, exactly like the underlying pointer.
        return self._pointer[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._pointer[index] = value

    def begin(self) -> Any:
        """Return the start marker: a pointer to the first element."""
        return self._pointer

    def end(self) -> Any:
        """Return the end marker: a pointer one past the last element.

        Never dereference the end marker.
        """
        pointer_type = type(self._pointer)
        start: int | None = ctypes.cast(self._pointer, ctypes.c_void_p).value
        offset: int = self._count * ctypes.sizeof(pointer_type._type_)
        return ctypes.cast((start or 0) + offset, pointer_type)

    def __repr__(self) -> str:
        return f"PointerSpan({self.element_type.__name__}*, count={self._count})"
