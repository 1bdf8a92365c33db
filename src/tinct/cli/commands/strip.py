# tinct:header:start
#
#   project      : Tinct
#   file         : strip.py
#   file_relpath : src/tinct/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct `strip` command.

Removes SGR escape sequences from its arguments, or from STDIN when no
argument is given. Useful to clean captured terminal output:

    some-tool --color=always | tinct strip > plain.log
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tinct.core.painted import strip_ansi

if TYPE_CHECKING:
    from tinct.cli.console import TinctConsole


@click.command(
    name="strip",
    help="Remove ANSI styling from TEXT (or from STDIN when no TEXT is given).",
)
@click.argument("text", nargs=-1)
def strip_command(text: tuple[str, ...]) -> None:
    """Remove ANSI styling from text.

    Args:
        text (tuple[str, ...]): Words to clean; joined with single spaces.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: TinctConsole = ctx.obj["console"]

    if text:
        console.print(strip_ansi(" ".join(text)))
        return

    stdin = click.get_text_stream("stdin")
    for line in stdin:
        console.print(strip_ansi(line), nl=False)
