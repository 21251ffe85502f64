# topmark:header:start
#
#   project      : Nestprint
#   file         : __init__.py
#   file_relpath : src/nestprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nestprint package.

Nestprint renders arbitrarily nested values into a deterministic text form,
deciding from each value's class alone whether it is a fixed-arity tuple
(``"( a b )"``), an ordered sequence (``"[ a b ]"``) or a scalar leaf. Stacks,
queues and priority queues render through their backing store, and raw
``ctypes`` memory through an explicit `PointerSpan`.

The names exported here form the stable public API.
"""

from __future__ import annotations

from nestprint.adapters import (
    AdapterRegistry,
    BackingView,
    PriorityQueue,
    Queue,
    Stack,
    backing_store,
    iter_backing,
)
from nestprint.config.model import RenderConfig
from nestprint.core.capability import (
    Capability,
    Classification,
    classify,
    classify_value,
    is_tuplable,
)
from nestprint.core.scalars import ScalarRegistry
from nestprint.core.traversal import traverse
from nestprint.errors import (
    ConfigError,
    NestingTooDeepError,
    NestprintError,
    RecursiveStructureError,
    UnsupportedTypeError,
)
from nestprint.rendering.api import Shown, render, shown, write
from nestprint.rendering.renderer import Renderer
from nestprint.span import PointerSpan

__all__ = [
    "AdapterRegistry",
    "BackingView",
    "Capability",
    "Classification",
    "ConfigError",
    "NestingTooDeepError",
    "NestprintError",
    "PointerSpan",
    "PriorityQueue",
    "Queue",
    "RecursiveStructureError",
    "RenderConfig",
    "Renderer",
    "ScalarRegistry",
    "Shown",
    "Stack",
    "UnsupportedTypeError",
    "backing_store",
    "classify",
    "classify_value",
    "is_tuplable",
    "iter_backing",
    "render",
    "shown",
    "traverse",
    "write",
]
