# topmark:header:start
#
#   project      : Nestprint
#   file         : model.py
#   file_relpath : src/nestprint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable rendering configuration.

[`RenderConfig`][nestprint.config.model.RenderConfig] is a frozen dataclass:
derive variants with [`merged`][nestprint.config.model.RenderConfig.merged]
(or `dataclasses.replace`) instead of mutating an instance.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Final

from nestprint.errors import ConfigError

DEFAULT_FLOAT_FORMAT: Final[str] = "g"


@dataclass(frozen=True)
class RenderConfig:
    """Options controlling how values are rendered.

    Attributes:
        float_format (str): Format spec applied to ``float`` leaves via ``format()``.
            The default ``"g"`` renders ``1.0`` as ``1``.
        max_depth (int | None): Maximum nesting depth of containers (the root
            container is depth 1). ``None`` disables the limit.
    """

    float_format: str = DEFAULT_FLOAT_FORMAT
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.float_format, str):
            raise ConfigError(
                f"float_format must be a string, got {type(self.float_format).__name__}"
            )
        try:
            format(0.0, self.float_format)
        except ValueError as exc:
            raise ConfigError(f"invalid float_format {self.float_format!r}: {exc}") from exc
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                raise ConfigError(
                    f"max_depth must be an integer, got {type(self.max_depth).__name__}"
                )
            if self.max_depth < 1:
                raise ConfigError(f"max_depth must be >= 1, got {self.max_depth}")

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the configurable option names."""
        return tuple(f.name for f in fields(cls))

    def merged(self, **overrides: Any) -> RenderConfig:
        """Return a copy with ``overrides`` applied; ``None`` overrides are ignored.

        Raises:
            ConfigError: If an override names an unknown option or has an invalid value.
        """
        unknown = sorted(set(overrides) - set(self.field_names()))
        if unknown:
            raise ConfigError(f"unknown configuration option(s): {', '.join(unknown)}")
        effective = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **effective)

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a plain dict (TOML-style dashed keys, unset values omitted)."""
        out: dict[str, Any] = {}
        for name in self.field_names():
            value = getattr(self, name)
            if value is not None:
                out[name.replace("_", "-")] = value
        return out
