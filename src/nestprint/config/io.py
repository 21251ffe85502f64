# topmark:header:start
#
#   project      : Nestprint
#   file         : io.py
#   file_relpath : src/nestprint/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load rendering configuration from TOML files.

Two sources are recognized:

* ``nestprint.toml``: options at the top level of the document;
* ``pyproject.toml``: options in the ``[tool.nestprint]`` table.

Option names accept dashes or underscores (``float-format`` / ``float_format``).
Parsing is done with `tomlkit` and returned as plain `dict` structures.

Example ``nestprint.toml``:

```toml
float-format = ".3f"
max-depth = 32
```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from nestprint.config.logging import get_logger
from nestprint.config.model import RenderConfig
from nestprint.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE
from nestprint.errors import ConfigError

logger = get_logger(__name__)

TomlTable = dict[str, Any]

CONFIG_FILE_NAMES: Final[tuple[str, ...]] = (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into a plain dict.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_options(data: TomlTable, *, pyproject: bool) -> TomlTable:
    """Return the Nestprint options table of a parsed document.

    Args:
        data (TomlTable): Parsed TOML document.
        pyproject (bool): Whether the document is a ``pyproject.toml``.

    Returns:
        TomlTable: The options table (empty when absent).

    Raises:
        ConfigError: If the options table exists but is not a table.
    """
    if not pyproject:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_TABLE, {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_TABLE}] must be a table")
    return cast("TomlTable", section)


def config_from_dict(options: TomlTable, *, base: RenderConfig | None = None) -> RenderConfig:
    """Build a `RenderConfig` from an options table.

    Args:
        options (TomlTable): Option names (dashed or underscored) mapped to values.
        base (RenderConfig | None): Config to start from. Defaults to `RenderConfig()`.

    Returns:
        RenderConfig: The resulting frozen config.

    Raises:
        ConfigError: On unknown options or invalid values.
    """
    normalized: dict[str, Any] = {key.replace("-", "_"): value for key, value in options.items()}
    return (base or RenderConfig()).merged(**normalized)


def load_config_file(path: Path) -> RenderConfig:
    """Load a `RenderConfig` from ``nestprint.toml`` or ``pyproject.toml``.

    Any file not named ``pyproject.toml`` is read as a ``nestprint.toml``-style document.

    Raises:
        ConfigError: If the file is unreadable, invalid, or holds invalid options.
    """
    data: TomlTable = load_toml_dict(path)
    options: TomlTable = extract_options(data, pyproject=path.name == PYPROJECT_FILE_NAME)
    logger.debug("loaded %d option(s) from %s", len(options), path)
    try:
        return config_from_dict(options)
    except ConfigError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def _has_options(path: Path) -> bool:
    if path.name != PYPROJECT_FILE_NAME:
        return True
    return bool(extract_options(load_toml_dict(path), pyproject=True))


def discover_config(start: Path) -> Path | None:
    """Find the nearest config file from ``start`` upwards.

    In each directory ``nestprint.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it holds a ``[tool.nestprint]`` table.

    Args:
        start (Path): Directory (or file inside the directory) to start from.

    Returns:
        Path | None: The config file, or None if none was found.
    """
    directory: Path = start.resolve()
    if directory.is_file():
        directory = directory.parent
    for candidate_dir in (directory, *directory.parents):
        for name in CONFIG_FILE_NAMES:
            candidate: Path = candidate_dir / name
            if candidate.is_file() and _has_options(candidate):
                logger.debug("discovered config file %s", candidate)
                return candidate
    return None


def load_config(path: Path | None = None, *, start: Path | None = None) -> RenderConfig:
    """Resolve the effective configuration.

    Args:
        path (Path | None): Explicit config file; when given, discovery is skipped.
        start (Path | None): Directory to start discovery from (defaults to the CWD).

    Returns:
        RenderConfig: The loaded config, or defaults when no config file exists.
    """
    if path is not None:
        return load_config_file(path)
    found: Path | None = discover_config(start or Path.cwd())
    if found is None:
        return RenderConfig()
    return load_config_file(found)
