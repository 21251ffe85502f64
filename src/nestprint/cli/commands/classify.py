# topmark:header:start
#
#   project      : Nestprint
#   file         : classify.py
#   file_relpath : src/nestprint/cli/commands/classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nestprint `classify` command.

Prints the capability tag of each parsed value: ``tuple``, ``sequence``,
``native`` or ``unsupported``. With ``-v`` the deciding rule and its reason
are shown as well. ``--expect TAG`` turns the command into a check that exits
with `ExitCode.FAILURE` when any value has a different tag.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from nestprint.cli.cli_types import EnumChoiceParam
from nestprint.cli.cmd_common import get_console, get_effective_verbosity
from nestprint.cli.exit_codes import ExitCode
from nestprint.cli.inputs import InputFormat, collect_values
from nestprint.cli.options import common_input_options
from nestprint.core.capability import Capability, classify_value

if TYPE_CHECKING:
    from nestprint.cli.console import ConsoleLike
    from nestprint.core.capability import Classification

CAPABILITY_STYLES: dict[Capability, dict[str, Any]] = {
    Capability.TUPLE: {"fg": "cyan", "bold": True},
    Capability.SEQUENCE: {"fg": "green", "bold": True},
    Capability.NATIVE: {"fg": "blue"},
    Capability.UNSUPPORTED: {"fg": "bright_red", "bold": True},
}


@click.command(
    name="classify",
    help="Print the capability tag (tuple, sequence, native, unsupported) of each value.",
)
@common_input_options
@click.option(
    "--expect",
    "expected",
    type=EnumChoiceParam(Capability),
    default=None,
    help="Exit with status 1 unless every value has this tag.",
)
@click.pass_context
def classify_command(
    ctx: click.Context,
    *,
    values: tuple[str, ...],
    source: str | None,
    input_format: InputFormat | None,
    expected: Capability | None,
) -> None:
    """Classify each value and print its tag.

    Args:
        ctx (click.Context): Current Click context.
        values (tuple[str, ...]): Positional VALUE arguments.
        source (str | None): ``--from`` input (file path or ``-``).
        input_format (InputFormat | None): How to parse the input.
        expected (Capability | None): Tag every value must have, if given.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    mismatches = 0
    for value in collect_values(values, source, input_format):
        result: Classification = classify_value(value)
        tag: str = console.styled(result.capability.key, **CAPABILITY_STYLES[result.capability])
        if vlevel > 0:
            console.print(f"{type(value).__qualname__}: {tag} (rule {result.rule}: {result.reason})")
        elif vlevel == 0:
            console.print(tag)
        if expected is not None and result.capability is not expected:
            mismatches += 1

    if mismatches and expected is not None:
        if vlevel >= 0:
            console.warn(f"{mismatches} value(s) are not classified as {expected.key}")
        ctx.exit(ExitCode.FAILURE)
