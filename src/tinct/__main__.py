# tinct:header:start
#
#   project      : Tinct
#   file         : __main__.py
#   file_relpath : src/tinct/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Module entry point for running Tinct via ``python -m tinct``.

Equivalent to running the ``tinct`` console script.
"""

from __future__ import annotations

from tinct.cli.main import cli

if __name__ == "__main__":
    cli()
