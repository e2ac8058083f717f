# topmark:header:start
#
#   project      : QueryPipeline
#   file         : __main__.py
#   file_relpath : src/querypipeline/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running QueryPipeline via ``python -m querypipeline``.

Delegates to :func:`querypipeline.cli.main.cli`, the same entry point as the
``querypipeline`` console script.

Examples:
    Decode a query string::

        python -m querypipeline decode "?q=python&tag=a&tag=b"
"""

from __future__ import annotations

from querypipeline.cli.main import cli

if __name__ == "__main__":
    cli()
