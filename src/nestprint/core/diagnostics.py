# topmark:header:start
#
#   project      : Nestprint
#   file         : diagnostics.py
#   file_relpath : src/nestprint/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics attached to Nestprint errors.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a message and an optional hint."""

    level: DiagnosticLevel
    message: str
    hint: str = ""

    def render(self, *, color: bool = False) -> str:
        """Return a one-line (or two-line, with a hint) human-readable form.

        Args:
            color (bool): Colorize the level tag using the level's color.

        Returns:
            str: ``"[error] message"`` optionally followed by ``"  hint: ..."``.
        """
        tag: str = f"[{self.level.value}]"
        if color:
            tag = self.level.color(tag)
        text: str = f"{tag} {self.message}"
        if self.hint:
            text += f"\n  hint: {self.hint}"
        return text
