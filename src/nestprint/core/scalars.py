# topmark:header:start
#
#   project      : Nestprint
#   file         : scalars.py
#   file_relpath : src/nestprint/core/scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Native scalar classes and their text form.

Leaves of a nested value are rendered by the value's own text form rather than
by the bracket/paren renderers. Two groups of classes qualify:

* **Text-like classes** (``str``, ``bytes``, ``bytearray`` and ``ctypes``
  arrays of ``c_char`` or ``c_wchar``). They are iterable, but the classifier
  excludes them before any sequence rule so a string never renders as a
  bracketed list of characters. A character array renders its ``.value``, which
  stops at the first NUL.
* **Registered scalars**: base classes kept in
  [`ScalarRegistry`][nestprint.core.scalars.ScalarRegistry]. A class is a
  scalar when it is a subclass of any registered base. Simple ``ctypes``
  values (``c_int(5)``, ``c_double(1.5)``) are registered by default and
  render through their ``.value``.

The registry is process-global. Mutating it invalidates the classifier's
memoized decisions.

Typical usage:
    ```python
    from nestprint.core.scalars import ScalarRegistry

    ScalarRegistry.register(Money)
    try:
        ...
    finally:
        ScalarRegistry.unregister(Money)
    ```
"""

from __future__ import annotations

import ctypes
import datetime
import numbers
import pathlib
import uuid
from enum import Enum
from threading import RLock
from typing import Any, Final

from nestprint.config.logging import get_logger

logger = get_logger(__name__)

TEXT_TYPES: Final[tuple[type, ...]] = (str, bytes, bytearray)

CHAR_ELEMENT_TYPES: Final[tuple[type, ...]] = (ctypes.c_char, ctypes.c_wchar)

DEFAULT_SCALAR_TYPES: Final[tuple[type, ...]] = (
    numbers.Number,
    type(None),
    Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    pathlib.PurePath,
    ctypes._SimpleCData,
)


def is_char_array(tp: type) -> bool:
    """Return True for ``ctypes`` arrays of ``c_char`` or ``c_wchar`` (C strings)."""
    return issubclass(tp, ctypes.Array) and getattr(tp, "_type_", None) in CHAR_ELEMENT_TYPES


def is_text_like(tp: type) -> bool:
    """Return True for text-like classes (``str``, ``bytes``, ``bytearray``, character arrays)."""
    return issubclass(tp, TEXT_TYPES) or is_char_array(tp)


class ScalarRegistry:
    """Process-global set of scalar base classes.

    Notes:
        - Thread safe via RLock.
        - Every mutation drops the classifier cache so later classifications
          observe the change.
    """

    _lock = RLock()
    _types: list[type] = list(DEFAULT_SCALAR_TYPES)

    @classmethod
    def is_scalar(cls, tp: type) -> bool:
        """Return True if ``tp`` is a subclass of a registered scalar base."""
        with cls._lock:
            return issubclass(tp, tuple(cls._types))

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return the qualified names of the registered scalar bases, in registration order."""
        with cls._lock:
            return tuple(f"{t.__module__}.{t.__qualname__}" for t in cls._types)

    @classmethod
    def register(cls, tp: type) -> None:
        """Register ``tp`` (and therefore its subclasses) as a native scalar.

        Args:
            tp (type): The scalar base class.

        Raises:
            TypeError: If ``tp`` is not a class.
            ValueError: If ``tp`` is already registered.
        """
        if not isinstance(tp, type):
            raise TypeError(f"expected a class, got {tp!r}")
        with cls._lock:
            if tp in cls._types:
                raise ValueError(f"{tp.__qualname__} is already registered as a scalar")
            cls._types.append(tp)
            logger.debug("registered scalar type %s", tp.__qualname__)
            _invalidate()

    @classmethod
    def unregister(cls, tp: type) -> bool:
        """Remove ``tp`` from the registry.

        Returns:
            bool: True if removed, else False.
        """
        with cls._lock:
            if tp not in cls._types:
                return False
            cls._types.remove(tp)
            logger.debug("unregistered scalar type %s", tp.__qualname__)
            _invalidate()
            return True

    @classmethod
    def reset(cls) -> None:
        """Restore the default scalar bases (intended for tests)."""
        with cls._lock:
            cls._types = list(DEFAULT_SCALAR_TYPES)
            _invalidate()


def _invalidate() -> None:
    from nestprint.core.capability import invalidate_cache

    invalidate_cache()


class ScalarFormatter:
    """Produce the native text form of a scalar leaf.

    Floats go through ``format(value, float_format)``; the default ``"g"``
    drops a trailing ``.0`` (``1.0`` renders as ``1``) and switches to
    exponent notation for very large or small magnitudes. Simple ``ctypes``
    values and character arrays are unwrapped to their ``.value`` first.
    Everything else (including ``bool``, ``bytes`` and ``None``) renders via
    ``str()``.
    """

    def __init__(self, float_format: str = "g") -> None:
        # Fail at construction rather than in the middle of a rendering.
        format(0.0, float_format)
        self.float_format = float_format

    def format(self, value: Any) -> str:
        """Return the text form of ``value``."""
        if isinstance(value, ctypes._SimpleCData) or is_char_array(type(value)):
            value = value.value
        if isinstance(value, float):
            return format(value, self.float_format)
        return str(value)
