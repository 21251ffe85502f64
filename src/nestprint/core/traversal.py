# topmark:header:start
#
#   project      : Nestprint
#   file         : traversal.py
#   file_relpath : src/nestprint/core/traversal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Traversal accessors for sequence-classified values.

An accessor turns a value into a *fresh* iterator over its elements in
traversal order; calling it again on the same (unmodified) value yields the
same elements in the same order. The classifier attaches one accessor to
every sequence rule, and [`traverse`][nestprint.core.traversal.traverse]
looks it up for a given value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from nestprint.adapters.access import iter_backing

if TYPE_CHECKING:
    from collections.abc import Iterator

Accessor = Callable[[Any], "Iterator[Any]"]


def iter_native(value: Any) -> Iterator[Any]:
    """Traverse a natively iterable collection (lists, sets, deques, spans, ...)."""
    return iter(value)


def iter_items(value: Any) -> Iterator[Any]:
    """Traverse a mapping as ``(key, value)`` pairs in the mapping's own order."""
    return iter(value.items())


def iter_contiguous(value: Any) -> Iterator[Any]:
    """Traverse a fixed-size contiguous ``ctypes`` array from first to last element."""
    return (value[i] for i in range(len(value)))


def iter_adapter(value: Any) -> Iterator[Any]:
    """Traverse an adapter container's backing store in natural stored order."""
    return iter_backing(value)


def traverse(value: Any) -> Iterator[Any]:
    """Return a fresh iterator over a sequence-classified value.

    Args:
        value (Any): Any value whose class classifies as ``SEQUENCE``.

    Returns:
        Iterator[Any]: Elements in traversal order.

    Raises:
        UnsupportedTypeError: If the value's class is not a sequence.
    """
    from nestprint.core.capability import Capability, classify
    from nestprint.errors import UnsupportedTypeError

    classification = classify(type(value))
    if classification.capability is not Capability.SEQUENCE or classification.traverse is None:
        raise UnsupportedTypeError(
            type(value),
            f"classified as {classification.capability.key}, not a sequence",
            rule=classification.rule,
        )
    return classification.traverse(value)
