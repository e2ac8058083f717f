# topmark:header:start
#
#   project      : QueryPipeline
#   file         : __init__.py
#   file_relpath : src/querypipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""QueryPipeline package.

QueryPipeline builds parsers for structured records out of small,
individually testable parsers for URL query parameters. A pipeline is seeded
with a record constructor and binds one field per argument; the finished
pipeline yields the record, or ``None`` when a required field is missing.
"""

from __future__ import annotations

from querypipeline.curry import curry
from querypipeline.errors import (
    ConfigError,
    CurryError,
    QueryDecodeError,
    QueryPipelineError,
)
from querypipeline.pipeline import (
    Pipeline,
    hardcoded,
    optional,
    required,
    succeed,
    with_,
    with_default,
)

__all__ = [
    "ConfigError",
    "CurryError",
    "Pipeline",
    "QueryDecodeError",
    "QueryPipelineError",
    "curry",
    "hardcoded",
    "optional",
    "required",
    "succeed",
    "with_",
    "with_default",
]
