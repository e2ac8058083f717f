# topmark:header:start
#
#   project      : QueryPipeline
#   file         : main.py
#   file_relpath : src/querypipeline/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``querypipeline`` command.

Group-level options configure color and internal logging once; subcommands
only deal with their own arguments.
"""

from __future__ import annotations

import click

from querypipeline.cli.commands.decode import decode_command
from querypipeline.cli.commands.version import version_command
from querypipeline.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="QueryPipeline CLI",
)
@click.option(
    "--no-color",
    "no_color",
    is_flag=True,
    help="Disable color output.",
)
@click.pass_context
def cli(ctx: click.Context, no_color: bool) -> None:
    """Entry point for the QueryPipeline CLI."""
    ctx.ensure_object(dict)
    setup_logging(level=resolve_env_log_level())
    if no_color:
        ctx.color = False

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(decode_command)

if __name__ == "__main__":
    cli()
