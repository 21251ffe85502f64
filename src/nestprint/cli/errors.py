# topmark:header:start
#
#   project      : Nestprint
#   file         : errors.py
#   file_relpath : src/nestprint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Nestprint CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors are converted with
    [`from_library_error`][nestprint.cli.errors.from_library_error].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from nestprint.cli.exit_codes import ExitCode
from nestprint.errors import ConfigError, NestprintError


class NestprintCliError(click.ClickException):
    """Base class for all Nestprint CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(self.format_message(), fg="bright_red"))
            return
        super().show(file)


class NestprintUsageError(NestprintCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class NestprintDataError(NestprintCliError):
    """Error for input that cannot be parsed in the requested input format."""

    exit_code = ExitCode.DATA_ERROR


class NestprintFileNotFoundError(NestprintCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class NestprintUnsupportedValueError(NestprintCliError):
    """Error for values that cannot be rendered."""

    exit_code = ExitCode.UNSUPPORTED_VALUE


class NestprintIOError(NestprintCliError):
    """Error for I/O errors while reading input."""

    exit_code = ExitCode.IO_ERROR


class NestprintConfigError(NestprintCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def from_library_error(exc: NestprintError) -> NestprintCliError:
    """Convert a library error into the matching CLI error.

    The CLI error message is the library error's diagnostic (message plus hint).
    """
    text: str = exc.diagnostic.render()
    if isinstance(exc, ConfigError):
        return NestprintConfigError(text)
    return NestprintUnsupportedValueError(text)
