# tinct:header:start
#
#   project      : Tinct
#   file         : version.py
#   file_relpath : src/tinct/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct `version` command.

Prints the current Tinct version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tinct.constants import TINCT_VERSION
from tinct.core.style import Style

if TYPE_CHECKING:
    from tinct.cli.console import TinctConsole


@click.command(
    name="version",
    help="Show the current version of Tinct.",
)
def version_command() -> None:
    """Show the current version of Tinct."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: TinctConsole = ctx.obj["console"]

    console.print(console.styled(TINCT_VERSION, Style().bold()))
