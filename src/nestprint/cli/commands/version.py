# topmark:header:start
#
#   project      : Nestprint
#   file         : version.py
#   file_relpath : src/nestprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nestprint `version` command.

Prints the current Nestprint version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

import click

from nestprint.cli.cli_types import EnumChoiceParam
from nestprint.cli.cmd_common import get_console, get_effective_verbosity
from nestprint.constants import NESTPRINT_VERSION

if TYPE_CHECKING:
    from nestprint.cli.console import ConsoleLike


class VersionFormat(str, Enum):
    """Output formats of the `version` command."""

    TEXT = "text"
    JSON = "json"


@click.command(
    name="version",
    help="Show the current version of Nestprint.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(VersionFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in VersionFormat)}).",
)
def version_command(*, output_format: VersionFormat | None = None) -> None:
    """Show the current version of Nestprint.

    Args:
        output_format (VersionFormat | None): Output format; plain text if None.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    if output_format is VersionFormat.JSON:
        console.print(json.dumps({"version": NESTPRINT_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("Nestprint version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(NESTPRINT_VERSION, bold=True)}")
    else:
        console.print(console.styled(NESTPRINT_VERSION, bold=True))
