# tinct:header:start
#
#   project      : Tinct
#   file         : __init__.py
#   file_relpath : src/tinct/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Process-global registries."""

from __future__ import annotations

from tinct.registry.styles import StyleRegistry

__all__ = ["StyleRegistry"]
