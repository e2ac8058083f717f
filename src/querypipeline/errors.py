# topmark:header:start
#
#   project      : QueryPipeline
#   file         : errors.py
#   file_relpath : src/querypipeline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by QueryPipeline.

A field that cannot be parsed is never an exception: pipelines report it by
returning ``None``. The exceptions below signal programming or environment
errors (a constructor that cannot be curried, an unreadable config file, a
query string rejected under strict decoding).
"""

from __future__ import annotations


class QueryPipelineError(Exception):
    """Base class for all QueryPipeline errors."""


class CurryError(QueryPipelineError, TypeError):
    """A callable cannot be turned into a chain of single-argument steps."""


class ConfigError(QueryPipelineError, ValueError):
    """Configuration is missing, malformed or holds invalid values."""


class QueryDecodeError(QueryPipelineError, ValueError):
    """A raw query string was rejected by the decoder."""
