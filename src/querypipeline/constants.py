# topmark:header:start
#
#   project      : QueryPipeline
#   file         : constants.py
#   file_relpath : src/querypipeline/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""QueryPipeline Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

QUERYPIPELINE_VERSION: str = get_version("querypipeline")

DEFAULT_TOML_CONFIG_NAME: str = "querypipeline.toml"
