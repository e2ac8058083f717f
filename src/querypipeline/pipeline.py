# topmark:header:start
#
#   project      : QueryPipeline
#   file         : pipeline.py
#   file_relpath : src/querypipeline/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline combinators for building record parsers from field parsers.

A pipeline is seeded with a curried record constructor and then binds one
field per constructor argument, left to right:

```python
@dataclass(frozen=True)
class Search:
    term: str
    page: int
    tags: list[str]

parser = (
    Pipeline.build(Search)
    .required(query.string("q"))
    .with_default(query.integer("page"), 1)
    .with_(query.string_list("tag"))
)
parser({"q": ["python"]})  # Search(term="python", page=1, tags=[])
parser({"page": ["2"]})  # None: "q" is required
```

The same algebra is available as plain functions taking the pipeline last:
`succeed`, `required`, `with_`, `optional`, `with_default` and `hardcoded`.

Overview
--------
- ``required``: an absent field makes the whole result ``None``.
- ``with_``: the field value is always present, whatever it is.
- ``optional``: ``with_`` for a field that may be ``None``; absence is data.
- ``with_default``: an absent field is replaced by a default.
- ``hardcoded``: a constant, independent of the parameters.

Every binder resolves its field into a `Maybe` and combines it with the
pipeline's current partial constructor through `querypipeline.maybe.map2`.
Once a required field is absent the result stays ``None`` for the rest of the
chain. Each combinator returns a new parser and leaves its inputs untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from querypipeline.config.logging import TRACE_LEVEL, get_logger
from querypipeline.curry import curry
from querypipeline.maybe import Just, from_optional, map2, to_optional
from querypipeline.maybe import with_default as maybe_with_default
from querypipeline.query import decode_query
from querypipeline.utils.introspection import format_callable_pretty

if TYPE_CHECKING:
    from collections.abc import Callable

    from querypipeline.config.logging import QueryPipelineLogger
    from querypipeline.config.model import DecodeConfig
    from querypipeline.maybe import Maybe
    from querypipeline.types import QueryParams, QueryParser

logger: QueryPipelineLogger = get_logger(__name__)

A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")


def _apply(fn: Callable[[A], B], value: A) -> B:
    return fn(value)


def _bind(
    resolve: Callable[[QueryParams], Maybe[A]],
    pipeline: QueryParser[Callable[[A], B] | None],
) -> QueryParser[B | None]:
    """Combine a field resolver with a pipeline through the optional lift."""

    def parse(params: QueryParams) -> B | None:
        # Both sides are evaluated; either may supply the absence.
        partial = from_optional(pipeline(params))
        field = resolve(params)
        return to_optional(map2(_apply, partial, field))

    return parse


def succeed(ctor: A) -> QueryParser[A | None]:
    """Return a parser that ignores its input and always yields ``ctor``.

    This seeds a pipeline. ``ctor`` is usually a curried record constructor,
    see `querypipeline.curry.curry`.

    Args:
        ctor (A): The value to yield.

    Returns:
        QueryParser[A | None]: A parser that never fails.
    """
    if logger.isEnabledFor(TRACE_LEVEL):
        logger.trace("Seeding pipeline with %s", format_callable_pretty(ctor))

    def parse(params: QueryParams) -> A | None:
        return ctor

    return parse


def required(
    field: QueryParser[A | None],
    pipeline: QueryParser[Callable[[A], B] | None],
) -> QueryParser[B | None]:
    """Bind a field that must be present.

    Args:
        field (QueryParser[A | None]): Field parser; ``None`` means absent.
        pipeline (QueryParser[Callable[[A], B] | None]): The pipeline so far.

    Returns:
        QueryParser[B | None]: ``f(a)`` when the pipeline yields ``f`` and the
            field yields ``a``; ``None`` otherwise.
    """

    def resolve(params: QueryParams) -> Maybe[A]:
        value = from_optional(field(params))
        if value is None and logger.isEnabledFor(TRACE_LEVEL):
            logger.trace("Required field %s is absent", format_callable_pretty(field))
        return value

    return _bind(resolve, pipeline)


def with_(
    field: QueryParser[A],
    pipeline: QueryParser[Callable[[A], B] | None],
) -> QueryParser[B | None]:
    """Bind a field whose value is always treated as present.

    Use this for parsers that never fail on their own, such as
    `querypipeline.query.string_list`. Only the pipeline itself can make the
    result ``None``.

    Args:
        field (QueryParser[A]): Field parser.
        pipeline (QueryParser[Callable[[A], B] | None]): The pipeline so far.

    Returns:
        QueryParser[B | None]: The pipeline with the field bound.
    """

    def resolve(params: QueryParams) -> Maybe[A]:
        return Just(field(params))

    return _bind(resolve, pipeline)


def optional(
    field: QueryParser[A | None],
    pipeline: QueryParser[Callable[[A | None], B] | None],
) -> QueryParser[B | None]:
    """Bind a field whose absence is passed to the constructor as ``None``.

    Behaves exactly like `with_`; the separate name documents that the
    constructor expects an optional value at this position.

    Args:
        field (QueryParser[A | None]): Field parser; ``None`` means absent.
        pipeline (QueryParser[Callable[[A | None], B] | None]): The pipeline so far.

    Returns:
        QueryParser[B | None]: The pipeline with the field bound.
    """
    return with_(field, pipeline)


def with_default(
    field: QueryParser[A | None],
    default: A,
    pipeline: QueryParser[Callable[[A], B] | None],
) -> QueryParser[B | None]:
    """Bind a field, substituting ``default`` when the field is absent.

    Args:
        field (QueryParser[A | None]): Field parser; ``None`` means absent.
        default (A): Value used when the field yields ``None``.
        pipeline (QueryParser[Callable[[A], B] | None]): The pipeline so far.

    Returns:
        QueryParser[B | None]: The pipeline with the field bound.
    """

    def resolve(params: QueryParams) -> Maybe[A]:
        return Just(maybe_with_default(from_optional(field(params)), default))

    return _bind(resolve, pipeline)


def hardcoded(
    value: A,
    pipeline: QueryParser[Callable[[A], B] | None],
) -> QueryParser[B | None]:
    """Bind a constant that does not depend on the parameters.

    The constant is always present, ``None`` included, so this binder never
    makes the result ``None``. For any other value it behaves like
    ``required(succeed(value), pipeline)``.
    """
    constant = Just(value)

    def resolve(params: QueryParams) -> Maybe[A]:
        return constant

    return _bind(resolve, pipeline)


@dataclass(frozen=True)
class Pipeline(Generic[F]):
    """Fluent wrapper around a pipeline parser.

    Each method returns a new `Pipeline`; the wrapper is itself a query
    parser and can be passed anywhere one is expected.

    Attributes:
        parser (QueryParser[F | None]): The wrapped pipeline parser.
    """

    parser: QueryParser[F | None]

    @classmethod
    def succeed(cls, ctor: A) -> Pipeline[A]:
        """Seed a pipeline with an already curried constructor."""
        return Pipeline(succeed(ctor))

    @classmethod
    def build(cls, ctor: Callable[..., Any], *, arity: int | None = None) -> Pipeline[Any]:
        """Seed a pipeline with a plain N-ary constructor.

        Args:
            ctor (Callable[..., Any]): Record class or function taking the fields positionally.
            arity (int | None): Number of fields to bind, see `querypipeline.curry.curry`.

        Returns:
            Pipeline[Any]: A pipeline expecting ``arity`` binder calls.
        """
        return Pipeline(succeed(curry(ctor, arity)))

    def required(self: Pipeline[Callable[[A], B]], field: QueryParser[A | None]) -> Pipeline[B]:
        """Bind a field that must be present. See `required`."""
        return Pipeline(required(field, self.parser))

    def with_(self: Pipeline[Callable[[A], B]], field: QueryParser[A]) -> Pipeline[B]:
        """Bind a field that is always present. See `with_`."""
        return Pipeline(with_(field, self.parser))

    def optional(
        self: Pipeline[Callable[[A | None], B]], field: QueryParser[A | None]
    ) -> Pipeline[B]:
        """Bind a field whose absence becomes ``None``. See `optional`."""
        return Pipeline(optional(field, self.parser))

    def with_default(
        self: Pipeline[Callable[[A], B]], field: QueryParser[A | None], default: A
    ) -> Pipeline[B]:
        """Bind a field with a fallback value. See `with_default`."""
        return Pipeline(with_default(field, default, self.parser))

    def hardcoded(self: Pipeline[Callable[[A], B]], value: A) -> Pipeline[B]:
        """Bind a constant. See `hardcoded`."""
        return Pipeline(hardcoded(value, self.parser))

    def __call__(self, params: QueryParams) -> F | None:
        return self.parser(params)

    def parse(self, raw_query: str, config: DecodeConfig | None = None) -> F | None:
        """Decode ``raw_query`` and run the pipeline on it.

        Args:
            raw_query (str): The query part of a URL, with or without the leading ``?``.
            config (DecodeConfig | None): Decoding options; defaults when None.

        Returns:
            F | None: The parsed value, or ``None`` if a required field is absent.

        Raises:
            QueryDecodeError: If the query string itself cannot be decoded.
        """
        return self(decode_query(raw_query, config))
