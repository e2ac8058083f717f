# topmark:header:start
#
#   project      : QueryPipeline
#   file         : version.py
#   file_relpath : src/querypipeline/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""QueryPipeline `version` command.

Prints the QueryPipeline version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from querypipeline.constants import QUERYPIPELINE_VERSION


@click.command(
    name="version",
    help="Show the current version of QueryPipeline.",
)
def version_command() -> None:
    """Show the current version of QueryPipeline."""
    click.echo(QUERYPIPELINE_VERSION)
