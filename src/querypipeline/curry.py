# topmark:header:start
#
#   project      : QueryPipeline
#   file         : curry.py
#   file_relpath : src/querypipeline/curry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn an N-ary constructor into a chain of single-argument steps.

A pipeline binds one field per step, so the record constructor it is seeded
with must accept its arguments one at a time:

```python
@dataclass(frozen=True)
class Point:
    x: int
    y: int

step = curry(Point)
assert step(1)(2) == Point(1, 2)
```

Each step returns a fresh closure over the arguments collected so far. A
partially applied step is never mutated and may be shared freely.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from querypipeline.config.logging import get_logger
from querypipeline.errors import CurryError
from querypipeline.utils.introspection import format_callable_pretty

if TYPE_CHECKING:
    from collections.abc import Callable

    from querypipeline.config.logging import QueryPipelineLogger

logger: QueryPipelineLogger = get_logger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(fn: Callable[..., Any]) -> tuple[int, int | None]:
    """Return the ``(required, maximum)`` positional argument counts of ``fn``.

    ``maximum`` is None when ``fn`` accepts ``*args``.

    Args:
        fn (Callable[..., Any]): Function, class or other callable to inspect.

    Returns:
        tuple[int, int | None]: Required and maximum positional argument counts.

    Raises:
        CurryError: If the signature cannot be inspected, or if ``fn`` has a
            keyword-only parameter without a default.
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise CurryError(
            f"Cannot inspect the signature of {format_callable_pretty(fn)}; "
            "pass an explicit arity"
        ) from exc

    required = 0
    maximum: int | None = 0
    for param in sig.parameters.values():
        if param.kind in _POSITIONAL_KINDS:
            if maximum is not None:
                maximum += 1
            if param.default is inspect.Parameter.empty:
                required += 1
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            maximum = None
        elif param.kind is inspect.Parameter.KEYWORD_ONLY:
            if param.default is inspect.Parameter.empty:
                raise CurryError(
                    f"{format_callable_pretty(fn)} has a required keyword-only "
                    f"parameter {param.name!r} that positional steps cannot fill"
                )
    return required, maximum


def _explicit_bounds(fn: Callable[..., Any]) -> tuple[int, int | None]:
    # Explicit arities are trusted for callables without an inspectable signature
    try:
        inspect.signature(fn)
    except (TypeError, ValueError):
        return 0, None
    return positional_arity(fn)


def curry(fn: Callable[..., Any], arity: int | None = None) -> Callable[[Any], Any]:
    """Return ``fn`` as a chain of ``arity`` single-argument callables.

    Args:
        fn (Callable[..., Any]): The N-ary callable, typically a record class.
        arity (int | None): Number of positional arguments to collect. Defaults to
            the number of required positional parameters of ``fn``; may be raised
            up to the number of positional parameters (unbounded with ``*args``)
            to also bind defaulted ones.

    Returns:
        Callable[[Any], Any]: The first step. Feeding it ``arity`` arguments one at
            a time calls ``fn`` with all of them, positionally and in order.

    Raises:
        CurryError: If the arity is below 1 or exceeds what ``fn`` accepts.
    """
    if arity is None:
        count, _ = positional_arity(fn)
    else:
        count = arity
        required, maximum = _explicit_bounds(fn)
        if count < required or (maximum is not None and count > maximum):
            raise CurryError(
                f"{format_callable_pretty(fn)} cannot be called with {count} "
                "positional argument(s)"
            )

    if count < 1:
        raise CurryError(f"Nothing to curry: {format_callable_pretty(fn)} takes no arguments")

    logger.trace("Currying %s over %d argument(s)", format_callable_pretty(fn), count)

    def collect(bound: tuple[Any, ...]) -> Callable[[Any], Any]:
        def step(value: Any) -> Any:
            args = (*bound, value)
            if len(args) == count:
                return fn(*args)
            return collect(args)

        return step

    return collect(())
