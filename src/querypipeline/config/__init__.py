# topmark:header:start
#
#   project      : QueryPipeline
#   file         : __init__.py
#   file_relpath : src/querypipeline/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for QueryPipeline: decoding options and logging setup."""

from __future__ import annotations

from querypipeline.config.io import load_decode_config, load_toml_dict
from querypipeline.config.model import DecodeConfig

__all__ = [
    "DecodeConfig",
    "load_decode_config",
    "load_toml_dict",
]
