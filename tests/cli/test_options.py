# topmark:header:start
#
#   project      : Nestprint
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for CLI option resolution, parameter types and input parsing."""

from __future__ import annotations

import click
import pytest

from nestprint.cli.cli_types import EnumChoiceParam
from nestprint.cli.errors import (
    NestprintConfigError,
    NestprintDataError,
    NestprintUnsupportedValueError,
    NestprintUsageError,
    from_library_error,
)
from nestprint.cli.inputs import AdapterKind, InputFormat, collect_values, parse_value
from nestprint.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from nestprint.errors import ConfigError, UnsupportedTypeError


def test_resolve_verbosity() -> None:
    assert resolve_verbosity(0, 0) == 0
    assert resolve_verbosity(2, 0) == 2
    assert resolve_verbosity(0, 1) == -1
    with pytest.raises(NestprintUsageError):
        resolve_verbosity(1, 1)


def test_color_mode_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is True

    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=None, stdout_isatty=False) is True


def test_enum_choice_param_accepts_aliases() -> None:
    param = EnumChoiceParam(AdapterKind)
    assert param.convert("LIFO", None, None) is AdapterKind.STACK
    assert param.convert("priority_queue", None, None) is AdapterKind.PRIORITY_QUEUE
    assert param.choices == ["stack", "queue", "priority-queue"]
    with pytest.raises(click.BadParameter, match="Must be one of"):
        param.convert("heapq", None, None)


def test_enum_choice_param_plain_enum() -> None:
    param = EnumChoiceParam(ColorMode)
    assert param.convert("Always", None, None) is ColorMode.ALWAYS
    assert [c.value for c in param.shell_complete(None, None, "a")] == ["auto", "always"]  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "text, fmt, expected",
    [
        ("(1, 'a')", InputFormat.LITERAL, (1, "a")),
        ("  [1, 2]\n", InputFormat.LITERAL, [1, 2]),
        ("[1, 2]", InputFormat.JSON, [1, 2]),
        ("a = 1", InputFormat.TOML, {"a": 1}),
    ],
)
def test_parse_value(text: str, fmt: InputFormat, expected: object) -> None:
    assert parse_value(text, fmt) == expected


def test_parse_value_rejects_code() -> None:
    """Only literals are accepted; expressions are data errors."""
    with pytest.raises(NestprintDataError):
        parse_value("__import__('os')", InputFormat.LITERAL)


def test_collect_values_needs_input() -> None:
    with pytest.raises(NestprintUsageError):
        collect_values((), None, None)
    assert collect_values(("1", "2"), None, None) == [1, 2]


def test_from_library_error_maps_exit_codes() -> None:
    assert isinstance(from_library_error(ConfigError("x")), NestprintConfigError)
    unsupported = from_library_error(UnsupportedTypeError(object, "nope"))
    assert isinstance(unsupported, NestprintUnsupportedValueError)
    assert unsupported.message.startswith("[error] cannot render value of type object")
