# topmark:header:start
#
#   project      : Nestprint
#   file         : options.py
#   file_relpath : src/nestprint/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

This module centralizes reusable options (verbosity, color, value input) so
commands and the group stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from nestprint.cli.cli_types import EnumChoiceParam
from nestprint.cli.errors import NestprintUsageError
from nestprint.cli.inputs import InputFormat

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` / ``-q`` counts.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags.

    Raises:
        NestprintUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise NestprintUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. ``--color=always`` / ``--color=never`` (``--no-color``).
        2. ``FORCE_COLOR`` (set and not ``"0"``) enables, ``NO_COLOR`` disables.
        3. Otherwise, color is enabled when stdout is a TTY.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from the CLI.
        stdout_isatty (bool | None): Override for TTY detection; auto-detected if None.

    Returns:
        bool: True if ANSI color should be emitted.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the value-input options shared by ``render`` and ``classify``.

    Adds the ``VALUES`` argument, ``--from`` (a file, or ``-`` for STDIN) and
    ``--input-format``.
    """
    f = click.argument("values", nargs=-1)(f)
    f = click.option(
        "--from",
        "source",
        type=str,
        default=None,
        help="Read a single value from a file ('-' reads STDIN).",
    )(f)
    f = click.option(
        "--input-format",
        "input_format",
        type=EnumChoiceParam(InputFormat),
        default=None,
        help=f"Input format ({', '.join(v.value for v in InputFormat)}). Default: literal.",
    )(f)
    return f
