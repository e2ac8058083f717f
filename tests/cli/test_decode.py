# topmark:header:start
#
#   project      : QueryPipeline
#   file         : test_decode.py
#   file_relpath : tests/cli/test_decode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `decode` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from querypipeline.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path


def test_decode_text_output(tmp_path: Path) -> None:
    """Parameters are listed one per line, sorted by name."""
    result = run_cli_in(tmp_path, ["--no-color", "decode", "?b=2&a=1&a=x%20y"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["a: ['1', 'x y']", "b: ['2']"]


def test_decode_json_output(tmp_path: Path) -> None:
    """JSON output is the decoded mapping."""
    result = run_cli_in(tmp_path, ["decode", "--format", "json", "tag=a&tag=b&q="])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"q": [""], "tag": ["a", "b"]}


def test_decode_empty_query(tmp_path: Path) -> None:
    """An empty query says so."""
    result = run_cli_in(tmp_path, ["decode", ""])
    assert_SUCCESS(result)
    assert result.output.strip() == "(no parameters)"


def test_decode_picks_up_config_in_cwd(tmp_path: Path) -> None:
    """``querypipeline.toml`` in the working directory is used by default."""
    (tmp_path / "querypipeline.toml").write_text('[decode]\nseparator = ";"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["decode", "--format", "json", "a=1;b=2"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"a": ["1"], "b": ["2"]}


def test_decode_explicit_config(tmp_path: Path) -> None:
    """``--config`` points at a pyproject.toml."""
    config = tmp_path / "pyproject.toml"
    config.write_text("[tool.querypipeline.decode]\nkeep_blank_values = false\n", encoding="utf-8")
    result = run_cli(["decode", "--config", str(config), "--format", "json", "a=&b=1"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"b": ["1"]}


def test_decode_invalid_config_exit_code(tmp_path: Path) -> None:
    """Invalid config exits with CONFIG_ERROR."""
    config = tmp_path / "querypipeline.toml"
    config.write_text("[decode]\nbogus = 1\n", encoding="utf-8")
    result = run_cli(["decode", "--config", str(config), "a=1"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "bogus" in result.output


def test_decode_rejected_query_exit_code(tmp_path: Path) -> None:
    """A query rejected under strict parsing exits with DATA_ERROR."""
    config = tmp_path / "querypipeline.toml"
    config.write_text("[decode]\nstrict_parsing = true\n", encoding="utf-8")
    result = run_cli(["decode", "--config", str(config), "a=1&junk"])
    assert result.exit_code == ExitCode.DATA_ERROR
