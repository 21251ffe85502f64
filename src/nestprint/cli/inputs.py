# topmark:header:start
#
#   project      : Nestprint
#   file         : inputs.py
#   file_relpath : src/nestprint/cli/inputs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn CLI input (arguments, files, STDIN) into Python values.

Values are given either as positional arguments (one value per argument) or
as the whole content of ``--from FILE`` / ``--from -`` (one value). Each
piece of text is parsed according to the input format:

* ``literal``: a Python literal, via `ast.literal_eval` (tuples, lists, sets,
  dicts, numbers, strings, bytes, booleans, ``None``);
* ``json``: a JSON document, via `json.loads`;
* ``toml``: a TOML document, via `tomlkit` (unwrapped into plain dicts).
"""

from __future__ import annotations

import ast
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit

from nestprint.adapters.containers import PriorityQueue, Queue, Stack
from nestprint.cli.errors import (
    NestprintDataError,
    NestprintFileNotFoundError,
    NestprintIOError,
    NestprintUsageError,
)
from nestprint.config.logging import get_logger
from nestprint.core.enum_mixins import KeyedStrEnum
from nestprint.core.traversal import traverse
from nestprint.errors import UnsupportedTypeError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


class InputFormat(KeyedStrEnum):
    """How CLI input text is parsed."""

    LITERAL = ("literal", "Python literal", ("python", "py"))
    JSON = ("json", "JSON document")
    TOML = ("toml", "TOML document")


class AdapterKind(KeyedStrEnum):
    """Adapter container a parsed sequence is pushed into before rendering."""

    STACK = ("stack", "last-in, first-out", ("lifo",))
    QUEUE = ("queue", "first-in, first-out", ("fifo",))
    PRIORITY_QUEUE = ("priority-queue", "binary min-heap", ("pq", "heap"))


def parse_value(text: str, input_format: InputFormat) -> Any:
    """Parse ``text`` according to ``input_format``.

    Raises:
        NestprintDataError: If the text is not valid in the requested format.
    """
    try:
        if input_format is InputFormat.JSON:
            return json.loads(text)
        if input_format is InputFormat.TOML:
            return tomlkit.parse(text).unwrap()
        return ast.literal_eval(text.strip())
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as exc:
        # json.JSONDecodeError and tomlkit.exceptions.ParseError are ValueErrors.
        raise NestprintDataError(f"cannot parse {input_format.key} input: {exc}") from exc


def read_source(source: str) -> str:
    """Read the text of ``source`` (a file path, or ``-`` for STDIN).

    Raises:
        NestprintFileNotFoundError: If the file does not exist.
        NestprintDataError: If the content is not valid UTF-8.
        NestprintIOError: On other I/O errors.
    """
    if source == "-":
        logger.debug("reading value from STDIN")
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise NestprintFileNotFoundError(f"input file not found: {source}") from exc
    except UnicodeDecodeError as exc:
        raise NestprintDataError(f"input file is not valid UTF-8: {source}") from exc
    except OSError as exc:
        raise NestprintIOError(f"cannot read {source}: {exc}") from exc


def collect_values(
    values: Sequence[str],
    source: str | None,
    input_format: InputFormat | None,
) -> list[Any]:
    """Parse the values given on the command line.

    Args:
        values (Sequence[str]): Positional VALUE arguments, one value each.
        source (str | None): ``--from`` argument (file path or ``-``).
        input_format (InputFormat | None): Input format; ``literal`` when None.

    Returns:
        list[Any]: Parsed values, in command-line order (``--from`` last).

    Raises:
        NestprintUsageError: If no value was given at all.
    """
    fmt: InputFormat = input_format or InputFormat.LITERAL
    texts: list[str] = list(values)
    if source is not None:
        texts.append(read_source(source))
    if not texts:
        raise NestprintUsageError("No value given: pass VALUES or use --from FILE (or '-').")
    return [parse_value(text, fmt) for text in texts]


def into_adapter(value: Any, kind: AdapterKind) -> Stack[Any] | Queue[Any] | PriorityQueue[Any]:
    """Push the elements of a sequence value into a new adapter of ``kind``.

    Raises:
        NestprintUsageError: If ``value`` is not a sequence.
        NestprintDataError: If the elements cannot be ordered (priority queue).
    """
    try:
        elements = list(traverse(value))
    except UnsupportedTypeError as exc:
        raise NestprintUsageError(
            f"--as {kind.key} needs a sequence value, got {type(value).__name__}"
        ) from exc
    if kind is AdapterKind.STACK:
        return Stack(elements)
    if kind is AdapterKind.QUEUE:
        return Queue(elements)
    try:
        return PriorityQueue(elements)
    except TypeError as exc:
        raise NestprintDataError(f"priority-queue elements are not comparable: {exc}") from exc
