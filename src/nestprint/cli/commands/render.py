# topmark:header:start
#
#   project      : Nestprint
#   file         : render.py
#   file_relpath : src/nestprint/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nestprint `render` command.

Parses each VALUE (or the ``--from`` input) and prints its nested rendering,
one line per value.

Examples:
    ```bash
    nestprint render "(5, 10, 15)"                  # ( 5 10 15 )
    nestprint render --as stack "[1.0, 2.0, 3.0]"   # [ 1 2 3 ]
    echo '{"a": [1, 2]}' | nestprint render --input-format json --from -
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from nestprint.cli.cli_types import EnumChoiceParam
from nestprint.cli.cmd_common import get_config, get_console, get_effective_verbosity
from nestprint.cli.errors import from_library_error
from nestprint.cli.inputs import AdapterKind, InputFormat, collect_values, into_adapter
from nestprint.cli.options import common_input_options
from nestprint.config.logging import get_logger
from nestprint.errors import NestprintError
from nestprint.rendering.renderer import Renderer

if TYPE_CHECKING:
    from nestprint.cli.console import ConsoleLike
    from nestprint.config.model import RenderConfig

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render VALUES (Python literals by default) as nested bracketed text.",
)
@common_input_options
@click.option(
    "--as",
    "adapter_kind",
    type=EnumChoiceParam(AdapterKind),
    default=None,
    help=f"Push the elements into an adapter first ({', '.join(v.value for v in AdapterKind)}).",
)
@click.option(
    "--float-format",
    "float_format",
    type=str,
    default=None,
    help="Format spec applied to floats (e.g. 'g', '.2f'). Overrides the config file.",
)
@click.option(
    "--max-depth",
    "max_depth",
    type=click.IntRange(min=1),
    default=None,
    help="Fail on values nested deeper than this. Overrides the config file.",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    values: tuple[str, ...],
    source: str | None,
    input_format: InputFormat | None,
    adapter_kind: AdapterKind | None,
    float_format: str | None,
    max_depth: int | None,
) -> None:
    """Render each value on its own line.

    Args:
        ctx (click.Context): Current Click context.
        values (tuple[str, ...]): Positional VALUE arguments.
        source (str | None): ``--from`` input (file path or ``-``).
        input_format (InputFormat | None): How to parse the input.
        adapter_kind (AdapterKind | None): Adapter to push elements into, if any.
        float_format (str | None): Float format override.
        max_depth (int | None): Nesting limit override.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    config: RenderConfig = get_config(ctx, float_format=float_format, max_depth=max_depth)

    parsed: list[Any] = collect_values(values, source, input_format)
    if adapter_kind is not None:
        parsed = [into_adapter(value, adapter_kind) for value in parsed]

    renderer = Renderer(config)
    for value in parsed:
        try:
            text: str = renderer.render(value)
        except NestprintError as exc:
            raise from_library_error(exc) from exc
        if vlevel > 0:
            console.print(console.styled(f"{type(value).__qualname__}:", dim=True))
            console.print(f"    {text}")
        else:
            console.print(text)
