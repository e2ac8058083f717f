# topmark:header:start
#
#   project      : QueryPipeline
#   file         : test_maybe.py
#   file_relpath : tests/unit/test_maybe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the boxed optional helpers in `querypipeline.maybe`."""

from __future__ import annotations

import operator

import pytest

from querypipeline.maybe import Just, from_optional, map2, to_optional, with_default


def test_from_optional_boxes_values() -> None:
    """Non-None values are boxed, falsy ones included."""
    assert from_optional(0) == Just(0)
    assert from_optional("") == Just("")
    assert from_optional(None) is None


def test_to_optional_unboxes() -> None:
    """`to_optional` reverses `from_optional` and keeps a boxed None."""
    assert to_optional(Just(3)) == 3
    assert to_optional(Just(None)) is None
    assert to_optional(None) is None


def test_with_default() -> None:
    """The default is only used when the value is absent."""
    assert with_default(Just(1), 5) == 1
    assert with_default(Just(None), 5) is None
    assert with_default(None, 5) == 5


def test_map2_applies_when_both_present() -> None:
    """Both operands present: the function is applied."""
    assert map2(operator.add, Just(1), Just(2)) == Just(3)


def test_map2_boxed_none_is_present() -> None:
    """``Just(None)`` is a present value, not absence."""
    assert map2(lambda a, b: (a, b), Just(None), Just(None)) == Just((None, None))


@pytest.mark.parametrize(
    ("first", "second"),
    [(None, Just(1)), (Just(1), None), (None, None)],
)
def test_map2_short_circuits(first: Just[int] | None, second: Just[int] | None) -> None:
    """Absence on either side yields absence without calling the function."""
    calls: list[tuple[int, int]] = []

    def record(a: int, b: int) -> int:
        calls.append((a, b))
        return a + b

    assert map2(record, first, second) is None
    assert calls == []


def test_just_repr_and_equality() -> None:
    """`Just` is a frozen value object."""
    assert repr(Just("a")) == "Just('a')"
    assert Just([1]) == Just([1])
    with pytest.raises(AttributeError):
        Just(1).value = 2  # type: ignore[misc]
