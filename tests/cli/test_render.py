# topmark:header:start
#
#   project      : Nestprint
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `render` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nestprint.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_render_literals_one_per_line(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "render", "(5, 10, 15)", "{1: (1, 1)}", "'hi'"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["( 5 10 15 )", "[ ( 1 ( 1 1 ) ) ]", "hi"]


@mark_cli
@parametrize(
    "kind, value, expected",
    [
        ("stack", "[1.0, 2.0, 3.0]", "[ 1 2 3 ]"),
        ("queue", "[25, 50, 75]", "[ 25 50 75 ]"),
        ("priority-queue", "[27, 26, 25]", "[ 25 27 26 ]"),
        ("pq", "[3, 1, 2]", "[ 1 3 2 ]"),
    ],
)
def test_render_as_adapters(tmp_path: Path, kind: str, value: str, expected: str) -> None:
    result = run_cli_in(tmp_path, ["render", "--as", kind, value])
    assert_SUCCESS(result)
    assert result.output.strip() == expected


@mark_cli
def test_render_as_requires_a_sequence(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", "--as", "stack", "42"])
    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "needs a sequence value" in result.output


@mark_cli
def test_render_json_from_stdin(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path,
        ["render", "--input-format", "json", "--from", "-"],
        input_text='{"a": [1, 2.0], "b": null}',
    )
    assert_SUCCESS(result)
    assert result.output.strip() == "[ ( a [ 1 2 ] ) ( b None ) ]"


@mark_cli
def test_render_toml_from_file(tmp_path: Path) -> None:
    (tmp_path / "data.toml").write_text('name = "demo"\nports = [80, 443]\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "--input-format", "toml", "--from", "data.toml"])
    assert_SUCCESS(result)
    assert result.output.strip() == "[ ( name demo ) ( ports [ 80 443 ] ) ]"


@mark_cli
def test_float_format_option_overrides_config(tmp_path: Path) -> None:
    (tmp_path / "nestprint.toml").write_text('float-format = ".3f"\n', encoding="utf-8")
    from_config = run_cli_in(tmp_path, ["render", "[0.5]"])
    assert_SUCCESS(from_config)
    assert from_config.output.strip() == "[ 0.500 ]"

    overridden = run_cli_in(tmp_path, ["render", "--float-format", ".1f", "[0.5]"])
    assert_SUCCESS(overridden)
    assert overridden.output.strip() == "[ 0.5 ]"


@mark_cli
def test_max_depth_option(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", "--max-depth", "1", "[[1]]"])
    assert_exit(result, ExitCode.UNSUPPORTED_VALUE)
    assert "max_depth=1" in result.output


@mark_cli
def test_verbose_render_shows_the_type(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "-v", "render", "[1]"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["list:", "    [ 1 ]"]
