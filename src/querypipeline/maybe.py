# topmark:header:start
#
#   project      : QueryPipeline
#   file         : maybe.py
#   file_relpath : src/querypipeline/maybe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Boxed optional values and the two-argument lift used by every binder.

Python's ``None`` does not nest: ``Optional[Optional[int]]`` is just
``Optional[int]``. An optional field, however, must be able to hand a present
``None`` to the record constructor while an absent required field must make
the whole parse absent. Field values are therefore boxed in `Just` while the
pipeline combines them, and ``None`` (no box at all) means absent.

Laws (for all ``f``, ``a``, ``b``):
    1) ``map2(f, Just(a), Just(b)) == Just(f(a, b))``
    2) ``map2(f, None, b) is None``
    3) ``map2(f, a, None) is None``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, Union

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Just(Generic[T]):
    """A present value. The value itself may be ``None``.

    Attributes:
        value (T): The boxed value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


Maybe = Union[Just[T], None]
"""Either a `Just` box or ``None`` for absence."""


def from_optional(value: T | None) -> Maybe[T]:
    """Box a plain optional value: ``None`` stays absent, anything else is present.

    Args:
        value (T | None): The value to box.

    Returns:
        Maybe[T]: ``Just(value)`` or ``None``.
    """
    return None if value is None else Just(value)


def to_optional(maybe: Maybe[T]) -> T | None:
    """Unbox a `Maybe` into a plain optional value."""
    return None if maybe is None else maybe.value


def with_default(maybe: Maybe[T], default: T) -> T:
    """Return the boxed value, or ``default`` when absent."""
    return default if maybe is None else maybe.value


def map2(fn: Callable[[A, B], C], first: Maybe[A], second: Maybe[B]) -> Maybe[C]:
    """Combine two optional values by applying ``fn`` only if both are present.

    This is the applicative ``liftA2`` for `Maybe`: absence on either side
    short-circuits and ``fn`` is not called.

    Args:
        fn (Callable[[A, B], C]): Binary function applied to the unboxed values.
        first (Maybe[A]): First optional operand.
        second (Maybe[B]): Second optional operand.

    Returns:
        Maybe[C]: ``Just(fn(a, b))`` when both operands are present, else ``None``.
    """
    if first is None or second is None:
        return None
    return Just(fn(first.value, second.value))
