# topmark:header:start
#
#   project      : Nestprint
#   file         : access.py
#   file_relpath : src/nestprint/adapters/access.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Transparent traversal of adapter containers.

Stacks, queues and priority queues restrict their public interface to
push / pop / peek and deliberately offer no iteration. This module grants
traversal over their *backing store* without copying it, provided the adapter
cooperates:

1. the adapter class defines ``__backing_store__()`` returning its live store, or
2. an explicit grant for the class is registered in
   [`AdapterRegistry`][nestprint.adapters.registry.AdapterRegistry].

Traversal follows the store's **natural order**, which is not the order the
adapter would hand elements out in: a stack traverses bottom to top, a queue
front to back, a heap-based priority queue in heap-array order.

Warning:
    [`BackingView`][nestprint.adapters.access.BackingView] allows replacing
    element values in place. Inserting or removing elements through the raw
    store returned by [`backing_store`][nestprint.adapters.access.backing_store]
    corrupts the adapter's bookkeeping (a heap's ordering, for instance); this
    module does not guard against it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from nestprint.adapters.registry import AdapterRegistry

if TYPE_CHECKING:
    from collections.abc import Iterator, MutableSequence

BACKING_STORE_HOOK = "__backing_store__"


@runtime_checkable
class ExposesBackingStore(Protocol):
    """Adapter that voluntarily grants access to its backing store."""

    def __backing_store__(self) -> MutableSequence[Any]:
        """Return the live backing store in natural stored order."""
        ...


def has_backing_store(tp: type) -> bool:
    """Return True if instances of ``tp`` grant backing-store access.

    Args:
        tp (type): The class to inspect.

    Returns:
        bool: True for classes defining ``__backing_store__`` or holding a registry grant.
    """
    return callable(getattr(tp, BACKING_STORE_HOOK, None)) or AdapterRegistry.is_granted(tp)


def backing_store(adapter: Any) -> MutableSequence[Any]:
    """Return the live backing store of ``adapter`` (never a copy).

    Args:
        adapter (Any): An adapter instance.

    Returns:
        MutableSequence[Any]: The store, in natural stored order.

    Raises:
        TypeError: If the adapter grants no access to its store.
    """
    if isinstance(adapter, ExposesBackingStore):
        return adapter.__backing_store__()
    accessor = AdapterRegistry.accessor_for(type(adapter))
    if accessor is None:
        raise TypeError(
            f"{type(adapter).__qualname__} does not expose its backing store; "
            f"define {BACKING_STORE_HOOK}() or register a grant in AdapterRegistry"
        )
    return accessor(adapter)


def iter_backing(adapter: Any) -> Iterator[Any]:
    """Iterate the adapter's elements read-only, in natural stored order."""
    return iter(backing_store(adapter))


class BackingView:
    """Mutable, fixed-length traversal over an adapter's backing store.

    The view supports ``len()``, iteration, ``reversed()``, indexing and item
    assignment. It offers no way to insert or remove elements, and it always
    reflects the adapter's current contents (elements pushed or popped after
    the view was created are seen by later accesses).

    Args:
        adapter (Any): An adapter instance granting backing-store access.

    Raises:
        TypeError: If the adapter grants no access to its store.
    """

    __slots__ = ("_adapter", "_store")

    def __init__(self, adapter: Any) -> None:
        self._adapter = adapter
        self._store: MutableSequence[Any] = backing_store(adapter)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._store)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._store)

    def __getitem__(self, index: int) -> Any:
        return self._store[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("BackingView does not support slice assignment")
        self._store[index] = value

    def __repr__(self) -> str:
        return f"BackingView({type(self._adapter).__qualname__}, len={len(self._store)})"
