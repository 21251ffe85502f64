# topmark:header:start
#
#   project      : Nestprint
#   file         : capability.py
#   file_relpath : src/nestprint/core/capability.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capability classifier: decide how a class renders, from the class alone.

Every class receives exactly one [`Capability`][nestprint.core.capability.Capability]:

* ``TUPLE``: fixed arity plus positional access; rendered as ``"( a b )"``.
* ``SEQUENCE``: ordered, restartable traversal of unknown length; rendered as
  ``"[ a b ]"``.
* ``NATIVE``: a leaf rendered by its own text form (numbers, strings, ...).
* ``UNSUPPORTED``: none of the above; rendering raises
  [`UnsupportedTypeError`][nestprint.errors.UnsupportedTypeError].

The decision is made by an ordered list of rules (`RULES`); the first rule
whose predicate matches wins. The order encodes the precedence:

1. text-like classes (strings, bytes, ``ctypes`` character arrays) are native
   scalars, even though they are iterable;
2. registered scalars (numbers, simple ``ctypes`` values, ...) are native;
3. bare ``ctypes`` pointers are rejected (they carry no length);
4. tuple rules come before every sequence rule, so a class that is both
   positionally addressable and iterable (a named tuple, a dataclass defining
   ``__iter__``) renders as a tuple;
5. single-pass iterators are rejected (traversal must be restartable);
6. sequence rules, each naming the traversal accessor used for its classes.

Classification depends on the class only, never on the value's content, and
is memoized per class. Registries that influence the rules call
[`invalidate_cache`][nestprint.core.capability.invalidate_cache] when mutated.
"""

from __future__ import annotations

import ctypes
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Final, get_origin

from nestprint.adapters.access import has_backing_store
from nestprint.config.logging import get_logger
from nestprint.core import traversal
from nestprint.core.enum_mixins import KeyedStrEnum
from nestprint.core.scalars import ScalarRegistry, is_text_like
from nestprint.core.tuples import declares_positions

if TYPE_CHECKING:
    from collections.abc import Callable

    from nestprint.core.traversal import Accessor

logger = get_logger(__name__)


class Capability(KeyedStrEnum):
    """How values of a class are rendered."""

    TUPLE = ("tuple", "fixed-arity positional aggregate", ("product",))
    SEQUENCE = ("sequence", "ordered traversable collection", ("array", "list"))
    NATIVE = ("native", "scalar rendered by its own text form", ("scalar", "leaf"))
    UNSUPPORTED = ("unsupported", "cannot be rendered", ())


@dataclass(frozen=True)
class CapabilityRule:
    """One entry of the ordered classification rule list.

    Attributes:
        name (str): Stable rule identifier (reported in classifications and errors).
        capability (Capability): Tag assigned when the rule matches.
        matches (Callable[[type], bool]): Predicate over the class.
        reason (str): Human-readable explanation of the decision.
        traverse (Accessor | None): Traversal accessor for ``SEQUENCE`` rules.
        hint (str): Suggested fix for ``UNSUPPORTED`` rules.
    """

    name: str
    capability: Capability
    matches: Callable[[type], bool]
    reason: str
    traverse: Accessor | None = None
    hint: str = ""


@dataclass(frozen=True)
class Classification:
    """Result of classifying a class.

    Attributes:
        capability (Capability): The single capability tag of the class.
        rule (str): Name of the rule that decided.
        reason (str): Why that rule applies.
        traverse (Accessor | None): Traversal accessor (``SEQUENCE`` only).
        hint (str): Suggested fix (``UNSUPPORTED`` only).
    """

    capability: Capability
    rule: str
    reason: str
    traverse: Accessor | None = None
    hint: str = ""


def _is_raw_pointer(tp: type) -> bool:
    return issubclass(tp, ctypes._Pointer)


def _is_tuple(tp: type) -> bool:
    return issubclass(tp, tuple)


def _is_struct(tp: type) -> bool:
    return issubclass(tp, ctypes.Structure)


def _is_one_shot_iterator(tp: type) -> bool:
    return issubclass(tp, Iterator)


def _is_contiguous_array(tp: type) -> bool:
    return issubclass(tp, ctypes.Array)


def _is_mapping(tp: type) -> bool:
    return issubclass(tp, Mapping)


def _is_iterable(tp: type) -> bool:
    return callable(getattr(tp, "__iter__", None))


RULES: Final[tuple[CapabilityRule, ...]] = (
    CapabilityRule(
        name="text",
        capability=Capability.NATIVE,
        matches=is_text_like,
        reason="text-like values render as text, never as a list of characters",
    ),
    CapabilityRule(
        name="scalar",
        capability=Capability.NATIVE,
        matches=ScalarRegistry.is_scalar,
        reason="registered scalar type",
    ),
    CapabilityRule(
        name="raw-pointer",
        capability=Capability.UNSUPPORTED,
        matches=_is_raw_pointer,
        reason="a raw pointer carries no element count",
        hint="wrap it as nestprint.PointerSpan(pointer, count)",
    ),
    CapabilityRule(
        name="tuple",
        capability=Capability.TUPLE,
        matches=_is_tuple,
        reason="tuple: fixed arity with positional access",
    ),
    CapabilityRule(
        name="ctypes-struct",
        capability=Capability.TUPLE,
        matches=_is_struct,
        reason="ctypes structure: declared _fields_ give a fixed arity",
    ),
    CapabilityRule(
        name="match-args",
        capability=Capability.TUPLE,
        matches=declares_positions,
        reason="__match_args__ declares a fixed set of positional fields",
    ),
    CapabilityRule(
        name="one-shot-iterator",
        capability=Capability.UNSUPPORTED,
        matches=_is_one_shot_iterator,
        reason="single-pass iterators cannot be traversed again",
        hint="materialize it first, e.g. list(iterator)",
    ),
    CapabilityRule(
        name="adapter",
        capability=Capability.SEQUENCE,
        matches=has_backing_store,
        reason="adapter container granting access to its backing store",
        traverse=traversal.iter_adapter,
    ),
    CapabilityRule(
        name="contiguous-array",
        capability=Capability.SEQUENCE,
        matches=_is_contiguous_array,
        reason="fixed-size contiguous ctypes array",
        traverse=traversal.iter_contiguous,
    ),
    CapabilityRule(
        name="mapping",
        capability=Capability.SEQUENCE,
        matches=_is_mapping,
        reason="mapping traversed as (key, value) pairs",
        traverse=traversal.iter_items,
    ),
    CapabilityRule(
        name="iterable",
        capability=Capability.SEQUENCE,
        matches=_is_iterable,
        reason="iterable collection",
        traverse=traversal.iter_native,
    ),
)

_FALLBACK: Final[Classification] = Classification(
    capability=Capability.UNSUPPORTED,
    rule="fallback",
    reason="neither fixed-arity positional access nor ordered traversal",
    hint="render a tuple or list built from the value, or register its class as a scalar",
)


def rule_names() -> tuple[str, ...]:
    """Return the rule names in evaluation order."""
    return tuple(rule.name for rule in RULES)


@lru_cache(maxsize=None)
def classify(tp: Any) -> Classification:
    """Classify a class (or a parameterized generic alias of one).

    Args:
        tp (Any): A class such as ``list`` or a generic alias such as
            ``tuple[int, int]`` (classified like its origin).

    Returns:
        Classification: The capability, the deciding rule and its reason.
    """
    origin = get_origin(tp)
    if isinstance(origin, type):
        return classify(origin)
    if not isinstance(tp, type):
        return Classification(
            capability=Capability.UNSUPPORTED,
            rule="not-a-class",
            reason=f"{tp!r} is not a class",
        )

    for rule in RULES:
        if rule.matches(tp):
            result = Classification(
                capability=rule.capability,
                rule=rule.name,
                reason=rule.reason,
                traverse=rule.traverse,
                hint=rule.hint,
            )
            break
    else:
        result = _FALLBACK

    logger.trace(
        "classified %s as %s (rule %s)", tp.__qualname__, result.capability.key, result.rule
    )
    return result


def classify_value(value: Any) -> Classification:
    """Classify ``value`` by its class."""
    return classify(type(value))


def is_tuplable(tp: Any) -> bool:
    """Return True if the class renders as a fixed-arity tuple."""
    return classify(tp).capability is Capability.TUPLE


def invalidate_cache() -> None:
    """Forget all memoized classifications."""
    classify.cache_clear()
