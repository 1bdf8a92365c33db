# tinct:header:start
#
#   project      : Tinct
#   file         : __init__.py
#   file_relpath : src/tinct/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct command line interface (Click)."""
