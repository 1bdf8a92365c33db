# tinct:header:start
#
#   project      : Tinct
#   file         : __init__.py
#   file_relpath : src/tinct/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct configuration: logging setup and TOML style definitions.

Submodules are imported explicitly (``tinct.config.logging``,
``tinct.config.loaders``, ``tinct.config.parse``) because the core engine
depends on the logging module while the loaders depend on the core.
"""
