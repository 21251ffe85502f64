# topmark:header:start
#
#   project      : Nestprint
#   file         : enum_mixins.py
#   file_relpath : src/nestprint/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for Nestprint (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: ``str`` Enum whose ``.value`` is a stable machine key,
      with a human label and parse aliases attached to each member.

Keep rendering-specific concepts (colors) out of this module.

Example:
    ```python
    class Mode(KeyedStrEnum):
        FAST = ("fast", "Skip validation", ("quick",))
        SAFE = ("safe", "Validate everything")

    assert Mode.parse("Quick") is Mode.FAST
    assert Mode.SAFE.label == "Validate everything"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches the key, the member name and the aliases, case-insensitively,
        treating '-', ' ' and '_' alike. Returns None when nothing matches.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            candidates: tuple[str, ...] = (m.value, m.name, *m.aliases)
            if any(token == _norm_token(c) for c in candidates):
                return m
        return None
