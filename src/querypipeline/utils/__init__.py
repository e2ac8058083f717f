# topmark:header:start
#
#   project      : QueryPipeline
#   file         : __init__.py
#   file_relpath : src/querypipeline/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal helpers."""
