# tinct:header:start
#
#   project      : Tinct
#   file         : constants.py
#   file_relpath : src/tinct/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TINCT_VERSION: str = get_version("tinct")

DEFAULT_TOML_CONFIG_NAME: str = "tinct.toml"
