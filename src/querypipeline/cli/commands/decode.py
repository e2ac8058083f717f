# topmark:header:start
#
#   project      : QueryPipeline
#   file         : decode.py
#   file_relpath : src/querypipeline/cli/commands/decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""QueryPipeline `decode` command.

Prints the parameter mapping field parsers see for a raw query string. Handy
when a pipeline yields ``None`` and you want to know whether a key is missing,
repeated or spelled differently.

Decoding options are read from ``--config`` when given, otherwise from
``querypipeline.toml`` in the working directory if present.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import click

from querypipeline.cli.errors import QueryPipelineConfigError, QueryPipelineDecodeError
from querypipeline.config import DecodeConfig, load_decode_config
from querypipeline.config.logging import get_logger
from querypipeline.constants import DEFAULT_TOML_CONFIG_NAME
from querypipeline.errors import ConfigError, QueryDecodeError
from querypipeline.query import decode_query

logger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Output formats of the `decode` command."""

    TEXT = "text"
    JSON = "json"


def _resolve_config(config_path: Path | None) -> DecodeConfig:
    if config_path is None:
        candidate = Path.cwd() / DEFAULT_TOML_CONFIG_NAME
        if not candidate.is_file():
            return DecodeConfig.from_defaults()
        config_path = candidate
    logger.debug("Loading decode config from %s", config_path)
    try:
        return load_decode_config(config_path)
    except ConfigError as exc:
        raise QueryPipelineConfigError(str(exc)) from exc


@click.command(
    name="decode",
    help="Show how a raw query string decodes into parameter values.",
)
@click.argument("query")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"TOML file with decode options (default: ./{DEFAULT_TOML_CONFIG_NAME} if present).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
@click.pass_context
def decode_command(
    ctx: click.Context,
    query: str,
    config_path: Path | None,
    output_format: str,
) -> None:
    """Decode QUERY and print each parameter with its values.

    Args:
        ctx (click.Context): Current Click context.
        query (str): Raw query string, with or without the leading ``?``.
        config_path (Path | None): Optional TOML file with decode options.
        output_format (str): ``text`` or ``json``.
    """
    config = _resolve_config(config_path)
    try:
        params = decode_query(query, config)
    except QueryDecodeError as exc:
        raise QueryPipelineDecodeError(str(exc)) from exc

    if OutputFormat(output_format) is OutputFormat.JSON:
        click.echo(json.dumps(params, indent=2, sort_keys=True))
        return

    if not params:
        click.echo("(no parameters)")
        return
    for name in sorted(params):
        key = click.style(name, fg="cyan", bold=True)
        values = ", ".join(repr(v) for v in params[name])
        click.echo(f"{key}: [{values}]", color=ctx.color)
