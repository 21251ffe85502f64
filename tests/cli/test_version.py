# topmark:header:start
#
#   project      : Nestprint
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from nestprint.constants import NESTPRINT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path


def test_version_outputs_installed_version(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == NESTPRINT_VERSION


def test_version_json_format(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": NESTPRINT_VERSION}


def test_version_ignores_broken_config(tmp_path: Path) -> None:
    """`version` never loads the render configuration."""
    (tmp_path / "nestprint.toml").write_text("max-depth = 'deep'\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "version"])
    assert_SUCCESS(result)
