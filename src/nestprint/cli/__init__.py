# topmark:header:start
#
#   project      : Nestprint
#   file         : __init__.py
#   file_relpath : src/nestprint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nestprint CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    nestprint = "nestprint.cli.main:cli"

All subcommands live in [`nestprint.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
