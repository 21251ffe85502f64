# topmark:header:start
#
#   project      : Nestprint
#   file         : __init__.py
#   file_relpath : src/nestprint/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks of Nestprint.

Public modules:
    - nestprint.core.capability
    - nestprint.core.diagnostics
    - nestprint.core.enum_mixins
    - nestprint.core.scalars
    - nestprint.core.traversal
    - nestprint.core.tuples
"""

from __future__ import annotations
