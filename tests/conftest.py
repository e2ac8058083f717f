# topmark:header:start
#
#   project      : QueryPipeline
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the QueryPipeline test suite.

Provides the record types shared by the pipeline tests and keeps the runtime
log level from leaking in through the developer's environment.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

import pytest
from hypothesis import settings

from querypipeline.config.logging import LOG_LEVEL_ENV_VAR, ChalkFormatter

if TYPE_CHECKING:
    from collections.abc import Iterator

settings.register_profile("thorough", max_examples=1000, deadline=None)

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Single(Generic[A]):
    """One-field record."""

    first: A


@dataclass(frozen=True)
class Pair(Generic[A, B]):
    """Two-field record."""

    first: A
    second: B


class Fruit(enum.Enum):
    """Values accepted by the ``fruit`` enum parser in tests."""

    APPLE = "apple"
    BANANA = "banana"
    CHERRY = "cherry"


FRUITS: dict[str, Fruit] = {f.value: f for f in Fruit}


@pytest.fixture(autouse=True)
def silence_querypipeline_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            the environment.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Drop the root handler installed by ``setup_logging`` in CLI tests.

    The CLI installs a handler on the runner's temporary stderr; leaving it in
    place would make later tests log to a closed stream.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, ChalkFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
