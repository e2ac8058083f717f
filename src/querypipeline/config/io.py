# topmark:header:start
#
#   project      : QueryPipeline
#   file         : io.py
#   file_relpath : src/querypipeline/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load decoding configuration from TOML files.

Two file shapes are recognized:
- ``pyproject.toml``: options live under ``[tool.querypipeline.decode]``.
- any other TOML file (e.g. ``querypipeline.toml``): options live under ``[decode]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from querypipeline.config.logging import get_logger
from querypipeline.config.model import DecodeConfig
from querypipeline.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from querypipeline.config.logging import QueryPipelineLogger

logger: QueryPipelineLogger = get_logger(__name__)

TomlTable = dict[str, Any]

PYPROJECT_TOML_NAME: str = "pyproject.toml"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _get_table(table: TomlTable, *keys: str) -> TomlTable | None:
    current: Any = table
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = cast("TomlTable", current).get(key)
    if current is None:
        return None
    if not isinstance(current, dict):
        raise ConfigError(f"[{'.'.join(keys)}] must be a table")
    return cast("TomlTable", current)


def load_decode_config(path: Path) -> DecodeConfig:
    """Load a `DecodeConfig` from a TOML file.

    Args:
        path (Path): A ``pyproject.toml`` or a standalone TOML file.

    Returns:
        DecodeConfig: The configuration; defaults when the file has no decode table.

    Raises:
        ConfigError: If the file is unreadable, not TOML, or holds invalid options.
    """
    data = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        table = _get_table(data, "tool", "querypipeline", "decode")
    else:
        table = _get_table(data, "decode")

    if table is None:
        logger.info("No decode options in %s, using defaults", path)
        return DecodeConfig.from_defaults()
    return DecodeConfig.from_mapping(table)
