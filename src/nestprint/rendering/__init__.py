# topmark:header:start
#
#   project      : Nestprint
#   file         : __init__.py
#   file_relpath : src/nestprint/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of nested values into the bracket / paren text form.

Public modules:
    - nestprint.rendering.api
    - nestprint.rendering.formats
    - nestprint.rendering.renderer
"""

from __future__ import annotations
