# topmark:header:start
#
#   project      : Nestprint
#   file         : __init__.py
#   file_relpath : src/nestprint/adapters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Adapter containers and transparent traversal of their backing stores.

Public modules:
    - nestprint.adapters.access
    - nestprint.adapters.containers
    - nestprint.adapters.registry
"""

from __future__ import annotations

from nestprint.adapters.access import (
    BackingView,
    ExposesBackingStore,
    backing_store,
    has_backing_store,
    iter_backing,
)
from nestprint.adapters.containers import PriorityQueue, Queue, Stack
from nestprint.adapters.registry import AdapterRegistry

__all__ = [
    "AdapterRegistry",
    "BackingView",
    "ExposesBackingStore",
    "PriorityQueue",
    "Queue",
    "Stack",
    "backing_store",
    "has_backing_store",
    "iter_backing",
]
