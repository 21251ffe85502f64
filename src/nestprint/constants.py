# topmark:header:start
#
#   project      : Nestprint
#   file         : constants.py
#   file_relpath : src/nestprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nestprint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

NESTPRINT_VERSION: str = get_version("nestprint")

CONFIG_FILE_NAME: str = "nestprint.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "nestprint"
