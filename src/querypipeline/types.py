# topmark:header:start
#
#   project      : QueryPipeline
#   file         : types.py
#   file_relpath : src/querypipeline/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared type aliases.

A query parser is any callable from decoded parameters to a value. Parsers that
may fail return ``X | None``, with ``None`` meaning "absent".
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TypeVar

T = TypeVar("T")

QueryParams = Mapping[str, Sequence[str]]
"""Decoded query: parameter name to its raw values, in query order."""

QueryParser = Callable[[QueryParams], T]
"""Pure function from decoded parameters to a parsed value."""
