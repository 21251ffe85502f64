# topmark:header:start
#
#   project      : Nestprint
#   file         : containers.py
#   file_relpath : src/nestprint/adapters/containers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Restricted adapter containers: stack, queue and priority queue.

Each adapter only offers insertion at one end, removal at one end and peeking.
None of them is iterable or indexable on its own; they are rendered (and
traversed) through the backing store they expose via ``__backing_store__()``.

Natural stored order per adapter:
    - `Stack`: bottom to top (insertion order), a list.
    - `Queue`: front to back (insertion order), a deque.
    - `PriorityQueue`: binary min-heap layout (``heapq``), a list. Pushing 27,
      26 then 25 stores ``[25, 27, 26]``.
"""

from __future__ import annotations

import heapq
from collections import deque
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")


class _Adapter(Generic[T]):
    """Common size queries shared by the adapters."""

    _store: list[T] | deque[T]

    def __len__(self) -> int:
        return len(self._store)

    def empty(self) -> bool:
        """Return True if the adapter holds no element."""
        return not self._store

    def __backing_store__(self) -> list[T] | deque[T]:
        """Return the live backing store in natural stored order."""
        return self._store

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._store)})"


class Stack(_Adapter[T]):
    """Last-in, first-out adapter over a list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._store: list[T] = []
        for item in items:
            self.push(item)

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        self._store.append(item)

    def pop(self) -> T:
        """Remove and return the top element.

        Raises:
            IndexError: If the stack is empty.
        """
        if not self._store:
            raise IndexError("pop from an empty Stack")
        return self._store.pop()

    def top(self) -> T:
        """Return the top element without removing it.

        Raises:
            IndexError: If the stack is empty.
        """
        if not self._store:
            raise IndexError("top of an empty Stack")
        return self._store[-1]


class Queue(_Adapter[T]):
    """First-in, first-out adapter over a deque."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._store: deque[T] = deque()
        for item in items:
            self.push(item)

    def push(self, item: T) -> None:
        """Append ``item`` at the back of the queue."""
        self._store.append(item)

    def pop(self) -> T:
        """Remove and return the front element.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._store:
            raise IndexError("pop from an empty Queue")
        return self._store.popleft()

    def front(self) -> T:
        """Return the front element (next to be popped).

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._store:
            raise IndexError("front of an empty Queue")
        return self._store[0]

    def back(self) -> T:
        """Return the most recently pushed element.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._store:
            raise IndexError("back of an empty Queue")
        return self._store[-1]


class PriorityQueue(_Adapter[T]):
    """Smallest-first adapter over a binary heap kept in a list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._store: list[T] = []
        for item in items:
            self.push(item)

    def push(self, item: T) -> None:
        """Insert ``item``, restoring the heap invariant."""
        heapq.heappush(self._store, item)

    def pop(self) -> T:
        """Remove and return the smallest element.

        Raises:
            IndexError: If the priority queue is empty.
        """
        if not self._store:
            raise IndexError("pop from an empty PriorityQueue")
        return heapq.heappop(self._store)

    def top(self) -> T:
        """Return the smallest element without removing it.

        Raises:
            IndexError: If the priority queue is empty.
        """
        if not self._store:
            raise IndexError("top of an empty PriorityQueue")
        return self._store[0]
