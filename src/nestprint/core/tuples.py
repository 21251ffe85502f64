# topmark:header:start
#
#   project      : Nestprint
#   file         : tuples.py
#   file_relpath : src/nestprint/core/tuples.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Positional access for fixed-arity aggregates.

Three families of classes expose a fixed arity and per-position access:

* ``tuple`` and its subclasses (named tuples included): positions are indices.
* ``ctypes.Structure`` subclasses: positions are the declared ``_fields_``,
  base-class fields first.
* classes declaring ``__match_args__`` (dataclasses, hand-written classes):
  positions are the named attributes, in declaration order.
"""

from __future__ import annotations

import ctypes
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


def struct_field_names(tp: type) -> tuple[str, ...]:
    """Return the field names of a ``ctypes.Structure`` subclass, base fields first."""
    names: list[str] = []
    for klass in reversed(tp.__mro__):
        for field in klass.__dict__.get("_fields_", ()):
            names.append(field[0])
    return tuple(names)


def declares_positions(tp: type) -> bool:
    """Return True if ``tp`` declares its positional fields through ``__match_args__``."""
    match_args = getattr(tp, "__match_args__", None)
    return isinstance(match_args, tuple) and all(isinstance(n, str) for n in match_args)


def field_names(tp: type) -> tuple[str, ...] | None:
    """Return the statically known position names of ``tp``.

    Returns:
        tuple[str, ...] | None: The names, or None for classes whose positions are
        plain indices (``tuple`` and subclasses without ``_fields``).
    """
    if issubclass(tp, tuple):
        fields = getattr(tp, "_fields", None)
        return tuple(fields) if isinstance(fields, tuple) else None
    if issubclass(tp, ctypes.Structure):
        return struct_field_names(tp)
    if declares_positions(tp):
        return tuple(tp.__match_args__)
    return None


def arity(value: Any) -> int:
    """Return the number of positions of a fixed-arity aggregate."""
    if isinstance(value, tuple):
        return len(value)
    names = field_names(type(value))
    if names is None:
        raise TypeError(f"{type(value).__qualname__} has no positional fields")
    return len(names)


def get_position(value: Any, index: int) -> Any:
    """Return the value at ``index`` (``0 <= index < arity(value)``).

    Raises:
        IndexError: If ``index`` is out of range.
    """
    if isinstance(value, tuple):
        return value[index]
    names = field_names(type(value)) or ()
    if not 0 <= index < len(names):
        raise IndexError(f"position {index} out of range for arity {len(names)}")
    return getattr(value, names[index])


def iter_positions(value: Any) -> Iterator[Any]:
    """Yield positions ``0 .. N-1`` of ``value`` in ascending order."""
    for index in range(arity(value)):
        yield get_position(value, index)
