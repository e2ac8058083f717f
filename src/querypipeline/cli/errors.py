# topmark:header:start
#
#   project      : QueryPipeline
#   file         : errors.py
#   file_relpath : src/querypipeline/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the QueryPipeline CLI.

Raise these in commands to report errors with standardized messages and exit
codes. Library exceptions from `querypipeline.errors` are translated into
them at the command boundary.
"""

from __future__ import annotations

import click

from querypipeline.cli.exit_codes import ExitCode


class QueryPipelineCliError(click.ClickException):
    """Base class for all QueryPipeline CLI errors."""

    exit_code = ExitCode.FAILURE


class QueryPipelineConfigError(QueryPipelineCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class QueryPipelineDecodeError(QueryPipelineCliError):
    """Error for query strings the decoder rejects."""

    exit_code = ExitCode.DATA_ERROR
