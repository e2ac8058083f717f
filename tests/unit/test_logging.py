# topmark:header:start
#
#   project      : QueryPipeline
#   file         : test_logging.py
#   file_relpath : tests/unit/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `querypipeline.config.logging` and TRACE output of the combinators."""

from __future__ import annotations

import logging

import pytest

from querypipeline import Pipeline, query
from querypipeline.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    QueryPipelineLogger,
    get_logger,
    resolve_env_log_level,
)
from tests.conftest import Single


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """Level names and numbers in the environment are resolved."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """No environment variable means no level."""
    assert resolve_env_log_level() is None


def test_get_logger_has_trace() -> None:
    """Package loggers support `.trace()`."""
    logger = get_logger("querypipeline.tests.trace")
    assert isinstance(logger, QueryPipelineLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_chalk_formatter_keeps_message() -> None:
    """Colored output still contains the formatted message."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    assert "hello world" in ChalkFormatter("%(message)s").format(record)


def test_required_absence_is_traced(caplog: pytest.LogCaptureFixture) -> None:
    """An absent required field is reported at TRACE level."""
    caplog.set_level(TRACE_LEVEL, logger="querypipeline.pipeline")
    parser = Pipeline.build(Single).required(query.string("foo"))
    assert parser({}) is None
    assert any(
        r.levelno == TRACE_LEVEL and "is absent" in r.getMessage() for r in caplog.records
    )


def test_combinators_silent_by_default(caplog: pytest.LogCaptureFixture) -> None:
    """Nothing is logged at the default levels."""
    caplog.set_level(logging.DEBUG, logger="querypipeline.pipeline")
    parser = Pipeline.build(Single).required(query.string("foo"))
    parser({})
    assert [r for r in caplog.records if r.name == "querypipeline.pipeline"] == []


def test_hardcoded_is_not_reported_absent(caplog: pytest.LogCaptureFixture) -> None:
    """A constant ``None`` is bound silently, even at TRACE level."""
    caplog.set_level(TRACE_LEVEL, logger="querypipeline.pipeline")
    parser = Pipeline.succeed(Single).hardcoded(None)
    assert parser({}) == Single(None)
    assert not any("is absent" in r.getMessage() for r in caplog.records)
