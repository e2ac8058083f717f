# topmark:header:start
#
#   project      : QueryPipeline
#   file         : query.py
#   file_relpath : src/querypipeline/query.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-parameter query parsers and raw query decoding.

These are the field parsers a pipeline binds. Each one looks at a single
parameter name in the decoded mapping:

- `string`, `integer`, `enum`: exactly one value is required; zero values,
  several values or an unparsable value all yield ``None``.
- `custom`, `string_list`: receive every value for the key and never fail on
  their own.
- `map_value`: post-processes any parser's result.

`decode_query` turns a raw query string into the mapping, using
`urllib.parse.parse_qs` with the options of a `DecodeConfig`.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, TypeVar
from urllib.parse import parse_qs

from querypipeline.config.logging import get_logger
from querypipeline.config.model import DecodeConfig
from querypipeline.errors import QueryDecodeError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from querypipeline.config.logging import QueryPipelineLogger
    from querypipeline.types import QueryParams, QueryParser

logger: QueryPipelineLogger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")

_INT_RE = re.compile(r"[+-]?[0-9]+")


def decode_query(raw: str, config: DecodeConfig | None = None) -> dict[str, list[str]]:
    """Decode a raw query string into a name-to-values mapping.

    A leading ``?`` is ignored so both ``"?a=1"`` and ``"a=1"`` are accepted.

    Args:
        raw (str): The query part of a URL.
        config (DecodeConfig | None): Decoding options; defaults when None.

    Returns:
        dict[str, list[str]]: Parameter names mapped to their values in query order.

    Raises:
        QueryDecodeError: If the query is malformed under ``strict_parsing`` or
            exceeds ``max_num_fields``.
    """
    cfg = config or DecodeConfig.from_defaults()
    query = raw[1:] if raw.startswith("?") else raw
    try:
        decoded = parse_qs(
            query,
            keep_blank_values=cfg.keep_blank_values,
            strict_parsing=cfg.strict_parsing,
            max_num_fields=cfg.max_num_fields,
            separator=cfg.separator,
        )
    except ValueError as exc:
        raise QueryDecodeError(f"Cannot decode query {raw!r}: {exc}") from exc
    logger.debug("Decoded query %r into %d parameter(s)", raw, len(decoded))
    return decoded


def _single(params: QueryParams, key: str) -> str | None:
    values = params.get(key, ())
    if len(values) != 1:
        return None
    return values[0]


def custom(key: str, fn: Callable[[list[str]], T]) -> QueryParser[T]:
    """Return a parser that hands every value of ``key`` to ``fn``.

    ``fn`` receives an empty list when the key is missing.

    Args:
        key (str): Parameter name.
        fn (Callable[[list[str]], T]): Converter for the list of raw values.

    Returns:
        QueryParser[T]: The parser.
    """

    def parse(params: QueryParams) -> T:
        return fn(list(params.get(key, ())))

    return parse


def string(key: str) -> QueryParser[str | None]:
    """Return a parser for a parameter holding exactly one string value."""

    def parse(params: QueryParams) -> str | None:
        return _single(params, key)

    return parse


def integer(key: str) -> QueryParser[int | None]:
    """Return a parser for a parameter holding exactly one decimal integer.

    Accepts an optional sign followed by ASCII digits; anything else is ``None``.
    """

    def parse(params: QueryParams) -> int | None:
        value = _single(params, key)
        if value is None or _INT_RE.fullmatch(value) is None:
            return None
        return int(value)

    return parse


def enum(key: str, table: Mapping[str, T]) -> QueryParser[T | None]:
    """Return a parser that looks up a single value of ``key`` in ``table``.

    Args:
        key (str): Parameter name.
        table (Mapping[str, T]): Accepted raw values and what they parse to.

    Returns:
        QueryParser[T | None]: The parser; ``None`` for missing, repeated or
            unknown values.
    """
    choices = dict(table)

    def parse(params: QueryParams) -> T | None:
        value = _single(params, key)
        if value is None:
            return None
        return choices.get(value)

    return parse


def string_list(key: str) -> QueryParser[list[str]]:
    """Return a parser for every value of ``key``; an absent key gives ``[]``."""
    return custom(key, list)


def map_value(fn: Callable[[T], U], parser: QueryParser[T]) -> QueryParser[U]:
    """Return a parser that applies ``fn`` to the result of ``parser``.

    ``fn`` sees the raw result, including ``None`` from a parser that may fail.
    """

    def parse(params: QueryParams) -> U:
        return fn(parser(params))

    return parse
