# topmark:header:start
#
#   project      : Nestprint
#   file         : cmd_common.py
#   file_relpath : src/nestprint/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by Nestprint CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from nestprint.cli.console import ClickConsole
from nestprint.cli.errors import NestprintConfigError
from nestprint.config.io import load_config
from nestprint.config.logging import get_logger
from nestprint.errors import ConfigError

if TYPE_CHECKING:
    import click

    from nestprint.cli.console import ConsoleLike
    from nestprint.config.model import RenderConfig

logger = get_logger(__name__)


def _obj(ctx: click.Context) -> dict[str, Any]:
    ctx.ensure_object(dict)
    return ctx.obj


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context (a plain one if the group did not run)."""
    obj = _obj(ctx)
    console = obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity resolved by the group (0 if unset)."""
    return int(_obj(ctx).get("verbosity_level", 0) or 0)


def get_config(ctx: click.Context, **overrides: Any) -> RenderConfig:
    """Return the effective render configuration for this invocation.

    The config file (``--config`` or the discovered ``nestprint.toml`` /
    ``pyproject.toml``) is loaded once per invocation; ``overrides`` from
    command options are applied on top (``None`` values are ignored).

    Raises:
        NestprintConfigError: If the configuration is invalid.
    """
    obj = _obj(ctx)
    try:
        config: RenderConfig | None = obj.get("config")
        if config is None:
            config_path: Path | None = obj.get("config_path")
            config = load_config(config_path, start=Path.cwd())
            obj["config"] = config
            logger.debug("effective config: %s", config)
        return config.merged(**overrides)
    except ConfigError as exc:
        raise NestprintConfigError(exc.diagnostic.render()) from exc
