# topmark:header:start
#
#   project      : QueryPipeline
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running QueryPipeline in a controlled working directory.

`run_cli_in()` changes the process working directory to ``tmp_path`` before
invoking the Click CLI, so the ``decode`` command's lookup of
``querypipeline.toml`` in the working directory can be exercised in isolation.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from querypipeline.cli.exit_codes import ExitCode
from querypipeline.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv)
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:
    """Assert a CLI invocation ended with exit code SUCCESS."""
    assert result.exit_code == ExitCode.SUCCESS, result.output
