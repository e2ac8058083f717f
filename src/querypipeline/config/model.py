# topmark:header:start
#
#   project      : QueryPipeline
#   file         : model.py
#   file_relpath : src/querypipeline/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decoding configuration model.

`DecodeConfig` is an immutable snapshot of the options handed to
`urllib.parse.parse_qs` when a raw query string is turned into the
name-to-values mapping that field parsers consume.

Scope:
    - *In scope*: field defaults and validation of values coming from TOML.
    - *Out of scope*: reading files. See `querypipeline.config.io`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from querypipeline.config.logging import get_logger
from querypipeline.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from querypipeline.config.logging import QueryPipelineLogger

logger: QueryPipelineLogger = get_logger(__name__)


@dataclass(frozen=True)
class DecodeConfig:
    """Options controlling how raw query strings are decoded.

    Attributes:
        keep_blank_values (bool): Keep ``key=`` pairs as an empty string value.
        strict_parsing (bool): Reject malformed pairs instead of skipping them.
        max_num_fields (int | None): Upper bound on the number of pairs, or None.
        separator (str): Pair separator, ``"&"`` by default.
    """

    keep_blank_values: bool = True
    strict_parsing: bool = False
    max_num_fields: int | None = None
    separator: str = "&"

    def __post_init__(self) -> None:
        if self.max_num_fields is not None and self.max_num_fields < 1:
            raise ConfigError(f"max_num_fields must be positive, got {self.max_num_fields}")
        if len(self.separator) != 1:
            raise ConfigError(f"separator must be a single character, got {self.separator!r}")

    @classmethod
    def from_defaults(cls) -> DecodeConfig:
        """Return the built-in default configuration."""
        return cls()

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any]) -> DecodeConfig:
        """Build a configuration from a parsed TOML table.

        Missing keys keep their defaults.

        Args:
            table (Mapping[str, Any]): Table with keys named after the fields.

        Returns:
            DecodeConfig: The validated configuration.

        Raises:
            ConfigError: If the table holds an unknown key or a value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(table) - known)
        if unknown:
            raise ConfigError(f"Unknown decode option(s): {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for key in ("keep_blank_values", "strict_parsing"):
            if key in table:
                value = table[key]
                if not isinstance(value, bool):
                    raise ConfigError(f"{key} must be a boolean, got {value!r}")
                kwargs[key] = value

        if "max_num_fields" in table:
            value = table["max_num_fields"]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"max_num_fields must be an integer, got {value!r}")
            kwargs["max_num_fields"] = value

        if "separator" in table:
            value = table["separator"]
            if not isinstance(value, str):
                raise ConfigError(f"separator must be a string, got {value!r}")
            kwargs["separator"] = value

        config = cls(**kwargs)
        logger.debug("Decode config from mapping: %s", config)
        return config
