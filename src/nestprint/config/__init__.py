# topmark:header:start
#
#   project      : Nestprint
#   file         : __init__.py
#   file_relpath : src/nestprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for Nestprint.

Public modules:
    - nestprint.config.io
    - nestprint.config.logging
    - nestprint.config.model
"""

from __future__ import annotations

from nestprint.config.model import RenderConfig

__all__ = ["RenderConfig"]
