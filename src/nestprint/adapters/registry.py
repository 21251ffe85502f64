# topmark:header:start
#
#   project      : Nestprint
#   file         : registry.py
#   file_relpath : src/nestprint/adapters/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Explicit backing-store grants for adapter classes Nestprint does not own.

Adapters written for Nestprint expose their store themselves through
``__backing_store__()``. Classes that cannot be changed (standard library,
third-party code) get an explicit grant here: a function returning the live
backing store of an instance. Nestprint never reaches into an adapter that has
neither.

Grants resolve along the MRO, so a grant for a base class covers its
subclasses unless a subclass has its own grant.

Built-in grants:
    - ``queue.Queue`` (and ``LifoQueue`` / ``PriorityQueue``): the ``queue``
      attribute (a deque, or a list for LIFO and heap-ordered queues).

Warning:
    Mutations operate on process-global state and invalidate the classifier
    cache. In tests, wrap them in try/finally.
"""

from __future__ import annotations

import queue
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable

from nestprint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableSequence

logger = get_logger(__name__)

StoreAccessor = Callable[[Any], "MutableSequence[Any]"]


def _queue_store(q: queue.Queue[Any]) -> MutableSequence[Any]:
    return q.queue


class AdapterRegistry:
    """Process-global mapping of adapter classes to backing-store accessors.

    Notes:
        - Thread safe via RLock.
        - Mutations invalidate the classifier cache.
    """

    _lock = RLock()
    _grants: dict[type, StoreAccessor] = {queue.Queue: _queue_store}

    @classmethod
    def accessor_for(cls, tp: type) -> StoreAccessor | None:
        """Return the accessor granted to ``tp`` or its nearest granted base.

        Args:
            tp (type): The adapter class.

        Returns:
            StoreAccessor | None: The accessor, or None if no class in the MRO has a grant.
        """
        with cls._lock:
            for base in getattr(tp, "__mro__", (tp,)):
                accessor = cls._grants.get(base)
                if accessor is not None:
                    return accessor
            return None

    @classmethod
    def is_granted(cls, tp: type) -> bool:
        """Return True if ``tp`` (or a base) has a registered grant."""
        return cls.accessor_for(tp) is not None

    @classmethod
    def as_mapping(cls) -> Mapping[type, StoreAccessor]:
        """Return a read-only snapshot of the registered grants."""
        with cls._lock:
            return MappingProxyType(dict(cls._grants))

    @classmethod
    def register(cls, tp: type, accessor: StoreAccessor) -> None:
        """Grant backing-store access for instances of ``tp``.

        Args:
            tp (type): The adapter class.
            accessor (StoreAccessor): Function returning the live backing store of an
                instance, in its natural stored order.

        Raises:
            TypeError: If ``tp`` is not a class or ``accessor`` is not callable.
            ValueError: If ``tp`` already has a grant of its own.
        """
        if not isinstance(tp, type):
            raise TypeError(f"expected a class, got {tp!r}")
        if not callable(accessor):
            raise TypeError(f"accessor for {tp.__qualname__} must be callable")
        with cls._lock:
            if tp in cls._grants:
                raise ValueError(f"{tp.__qualname__} already has a backing-store grant")
            cls._grants[tp] = accessor
            logger.debug("granted backing-store access for %s", tp.__qualname__)
            _invalidate()

    @classmethod
    def unregister(cls, tp: type) -> bool:
        """Revoke the grant registered for ``tp`` itself.

        Returns:
            bool: True if a grant was removed, else False.
        """
        with cls._lock:
            if cls._grants.pop(tp, None) is None:
                return False
            logger.debug("revoked backing-store access for %s", tp.__qualname__)
            _invalidate()
            return True


def _invalidate() -> None:
    from nestprint.core.capability import invalidate_cache

    invalidate_cache()
