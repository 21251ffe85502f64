# topmark:header:start
#
#   project      : Nestprint
#   file         : test_registry.py
#   file_relpath : tests/adapters/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for explicit backing-store grants (`AdapterRegistry`)."""

from __future__ import annotations

import queue
from typing import Any

import pytest

from nestprint import render
from nestprint.adapters import AdapterRegistry
from nestprint.core.capability import Capability, classify
from nestprint.errors import UnsupportedTypeError


class ThirdPartyStack:
    """An adapter whose source cannot be changed: no hook, no iteration."""

    def __init__(self) -> None:
        self.c: list[Any] = []

    def push(self, item: Any) -> None:
        self.c.append(item)


class SubStack(ThirdPartyStack):
    pass


def test_queue_grant_is_built_in() -> None:
    """The standard library queue classes are granted by default."""
    assert AdapterRegistry.is_granted(queue.Queue)
    assert AdapterRegistry.is_granted(queue.LifoQueue)
    assert queue.Queue in AdapterRegistry.as_mapping()


@pytest.mark.usefixtures("restore_registries")
def test_register_grant_makes_adapter_renderable() -> None:
    """An explicit grant turns an unsupported adapter into a sequence."""
    stack = ThirdPartyStack()
    stack.push(1)
    stack.push(2)
    with pytest.raises(UnsupportedTypeError):
        render(stack)

    AdapterRegistry.register(ThirdPartyStack, lambda s: s.c)

    assert classify(ThirdPartyStack).capability is Capability.SEQUENCE
    assert render(stack) == "[ 1 2 ]"


@pytest.mark.usefixtures("restore_registries")
def test_grant_covers_subclasses() -> None:
    """Grants resolve along the MRO."""
    AdapterRegistry.register(ThirdPartyStack, lambda s: s.c)
    sub = SubStack()
    sub.push("x")
    assert AdapterRegistry.is_granted(SubStack)
    assert render(sub) == "[ x ]"


@pytest.mark.usefixtures("restore_registries")
def test_unregister_revokes_the_grant() -> None:
    """After revoking, the adapter is unsupported again."""
    AdapterRegistry.register(ThirdPartyStack, lambda s: s.c)
    assert AdapterRegistry.unregister(ThirdPartyStack) is True
    assert AdapterRegistry.unregister(ThirdPartyStack) is False
    assert classify(ThirdPartyStack).capability is Capability.UNSUPPORTED


@pytest.mark.usefixtures("restore_registries")
def test_register_validation() -> None:
    """Duplicate grants, non-classes and non-callables are rejected."""
    AdapterRegistry.register(ThirdPartyStack, lambda s: s.c)
    with pytest.raises(ValueError, match="already has"):
        AdapterRegistry.register(ThirdPartyStack, lambda s: s.c)
    with pytest.raises(TypeError, match="expected a class"):
        AdapterRegistry.register(ThirdPartyStack(), lambda s: s.c)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="must be callable"):
        AdapterRegistry.register(SubStack, "c")  # type: ignore[arg-type]


def test_as_mapping_is_read_only() -> None:
    """The mapping snapshot cannot be used to mutate the registry."""
    grants = AdapterRegistry.as_mapping()
    with pytest.raises(TypeError):
        grants[ThirdPartyStack] = lambda s: s.c  # type: ignore[index]
