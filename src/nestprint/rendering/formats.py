# topmark:header:start
#
#   project      : Nestprint
#   file         : formats.py
#   file_relpath : src/nestprint/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delimiters of the bracket and paren formats.

Sequence: ``"[ " + (element + " ")* + "]"``, so an empty sequence is ``"[ ]"``.
Tuple: ``"( " + (position + " ")* + ")"``, so an arity-0 tuple is ``"( )"``.
"""

from __future__ import annotations

from enum import Enum


class Delimiters(Enum):
    """Opening and closing tokens of each container format."""

    SEQUENCE = ("[", "]")
    TUPLE = ("(", ")")

    @property
    def opening(self) -> str:
        """Opening token followed by the element separator."""
        return self.value[0] + ELEMENT_SEPARATOR

    @property
    def closing(self) -> str:
        """Closing token."""
        return self.value[1]


ELEMENT_SEPARATOR: str = " "
