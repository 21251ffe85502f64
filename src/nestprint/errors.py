# topmark:header:start
#
#   project      : Nestprint
#   file         : errors.py
#   file_relpath : src/nestprint/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the Nestprint library.

Every exception derives from [`NestprintError`][nestprint.errors.NestprintError]
and additionally from the builtin exception a caller would naturally catch
(``TypeError`` for values that cannot be rendered, ``ValueError`` for values
whose shape cannot be rendered), so that generic handlers keep working.

Each error exposes a [`Diagnostic`][nestprint.core.diagnostics.Diagnostic]
through its ``diagnostic`` property; the CLI prints that diagnostic instead of
a traceback.

Misuse that cannot be detected (a `PointerSpan` longer than the memory it
points to, inserting into or removing from an adapter's backing store while
traversing it) does not have an exception: it is a precondition on the caller.
"""

from __future__ import annotations

import sys

from nestprint.core.diagnostics import Diagnostic, DiagnosticLevel


def _qualname(tp: type) -> str:
    module: str = getattr(tp, "__module__", "") or ""
    name: str = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", repr(tp))
    if module in ("builtins", ""):
        return name
    return f"{module}.{name}"


class NestprintError(Exception):
    """Base class for all Nestprint errors."""

    hint: str = ""

    @property
    def diagnostic(self) -> Diagnostic:
        """Return the error as a structured diagnostic."""
        return Diagnostic(level=DiagnosticLevel.ERROR, message=str(self), hint=self.hint)


class UnsupportedTypeError(NestprintError, TypeError):
    """A value's class is neither a tuple, a sequence nor a native scalar.

    Attributes:
        value_type (type): The offending class.
        rule (str): Name of the classifier rule that rejected the class.
        reason (str): Why the class was rejected.
        location (str): Where the value sits inside the rendered structure
            (``"$"`` is the root, ``"[i]"`` a sequence element, ``"(i)"`` a tuple position).
    """

    def __init__(
        self,
        value_type: type,
        reason: str,
        *,
        rule: str = "",
        location: str = "$",
        hint: str = "",
    ) -> None:
        self.value_type = value_type
        self.reason = reason
        self.rule = rule
        self.location = location
        self.hint = hint
        super().__init__(
            f"cannot render value of type {_qualname(value_type)} at {location}: {reason}"
        )


class RecursiveStructureError(NestprintError, ValueError):
    """A container (directly or indirectly) contains itself."""

    hint = "break the reference cycle or render a copy without the self-reference"

    def __init__(self, value_type: type, *, location: str = "$") -> None:
        self.value_type = value_type
        self.location = location
        super().__init__(
            f"value of type {_qualname(value_type)} at {location} contains itself"
        )


class NestingTooDeepError(NestprintError, ValueError):
    """A value nests deeper than the configured ``max_depth``.

    With ``max_depth=None`` the value nests deeper than the interpreter's
    recursion limit allows; no configured limit was involved.
    """

    hint = "raise 'max-depth' in the configuration or unset it"

    def __init__(self, max_depth: int | None, *, location: str = "$") -> None:
        self.max_depth = max_depth
        self.location = location
        if max_depth is None:
            self.hint = "flatten the value; it nests deeper than Python's recursion limit"
            super().__init__(
                f"nesting exceeds the recursion limit ({sys.getrecursionlimit()}) at {location}"
            )
        else:
            super().__init__(f"nesting exceeds max_depth={max_depth} at {location}")


class ConfigError(NestprintError, ValueError):
    """Invalid configuration (unknown key, wrong value type, unreadable TOML)."""
