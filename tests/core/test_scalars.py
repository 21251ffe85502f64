# topmark:header:start
#
#   project      : Nestprint
#   file         : test_scalars.py
#   file_relpath : tests/core/test_scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for native scalars: the registry and the text formatter."""

from __future__ import annotations

import ctypes
import datetime
import decimal
import enum
import fractions
import pathlib
import uuid
from typing import Any

import pytest

from nestprint.core.scalars import ScalarFormatter, ScalarRegistry, is_text_like
from tests.conftest import parametrize


class Money:
    def __init__(self, cents: int) -> None:
        self.cents = cents

    def __str__(self) -> str:
        return f"${self.cents / 100:.2f}"


class Color(enum.Enum):
    RED = 1


@parametrize(
    "tp",
    [
        int,
        float,
        complex,
        bool,
        decimal.Decimal,
        fractions.Fraction,
        type(None),
        Color,
        datetime.date,
        datetime.datetime,
        datetime.time,
        datetime.timedelta,
        uuid.UUID,
        pathlib.PurePosixPath,
        pathlib.Path,
        ctypes.c_int,
        ctypes.c_double,
        ctypes.c_bool,
    ],
)
def test_default_scalars(tp: type) -> None:
    """Numbers, None, enums, date/time values, UUIDs, paths and simple ctypes values are scalars."""
    assert ScalarRegistry.is_scalar(tp)


@parametrize("tp", [list, tuple, dict, str, Money])
def test_non_scalars(tp: type) -> None:
    """Containers, text and unregistered classes are not registered scalars."""
    assert not ScalarRegistry.is_scalar(tp)


def test_text_like() -> None:
    """str, bytes, bytearray (and subclasses) and ctypes character arrays are text-like."""
    assert is_text_like(str)
    assert is_text_like(bytes)
    assert is_text_like(bytearray)
    assert is_text_like(ctypes.c_char * 8)
    assert is_text_like(ctypes.c_wchar * 8)
    assert not is_text_like(ctypes.c_int * 8)
    assert not is_text_like(ctypes.c_char)
    assert not is_text_like(memoryview)
    assert not is_text_like(list)


@pytest.mark.usefixtures("restore_registries")
def test_register_and_unregister() -> None:
    """Registering a base makes it and its subclasses scalars until unregistered."""

    class Cents(Money):
        pass

    ScalarRegistry.register(Money)
    assert ScalarRegistry.is_scalar(Money)
    assert ScalarRegistry.is_scalar(Cents)
    assert any(name.endswith("Money") for name in ScalarRegistry.names())

    assert ScalarRegistry.unregister(Money) is True
    assert ScalarRegistry.unregister(Money) is False
    assert not ScalarRegistry.is_scalar(Money)


@pytest.mark.usefixtures("restore_registries")
def test_register_rejects_duplicates_and_non_classes() -> None:
    """Registering twice or registering an instance is an error."""
    ScalarRegistry.register(Money)
    with pytest.raises(ValueError, match="already registered"):
        ScalarRegistry.register(Money)
    with pytest.raises(TypeError, match="expected a class"):
        ScalarRegistry.register(Money(1))  # type: ignore[arg-type]


@pytest.mark.usefixtures("restore_registries")
def test_reset_restores_defaults() -> None:
    """`reset()` drops custom registrations and restores the default bases."""
    defaults = ScalarRegistry.names()
    ScalarRegistry.register(Money)
    ScalarRegistry.reset()
    assert ScalarRegistry.names() == defaults


@parametrize(
    "value, expected",
    [
        (1.0, "1"),
        (0.0, "0"),
        (2.5, "2.5"),
        (-3.0, "-3"),
        (1e20, "1e+20"),
        (5, "5"),
        (True, "True"),
        (None, "None"),
        ("Oh yeah !", "Oh yeah !"),
        (b"ab", "b'ab'"),
        (Color.RED, "Color.RED"),
        (ctypes.c_int(5), "5"),
        (ctypes.c_double(1.0), "1"),
        (ctypes.create_string_buffer(b"hi", 3), "b'hi'"),
        (ctypes.create_unicode_buffer("hi", 3), "hi"),
    ],
)
def test_default_formatter(value: Any, expected: str) -> None:
    """Floats use the 'g' format by default; ctypes values are unwrapped; the rest uses str()."""
    assert ScalarFormatter().format(value) == expected


def test_custom_float_format() -> None:
    """A custom float format applies to floats only."""
    formatter = ScalarFormatter(".2f")
    assert formatter.format(1.0) == "1.00"
    assert formatter.format(1) == "1"


def test_invalid_float_format_fails_at_construction() -> None:
    """An unusable format spec is rejected before anything is rendered."""
    with pytest.raises(ValueError):
        ScalarFormatter("d")
