# tinct:header:start
#
#   project      : Tinct
#   file         : styles.py
#   file_relpath : src/tinct/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct `styles` command.

Lists the registered named styles, each rendered in itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tinct.registry.styles import StyleRegistry
from tinct.shortcuts import paint

if TYPE_CHECKING:
    from tinct.cli.console import TinctConsole


@click.command(
    name="styles",
    help="List the registered named styles.",
)
@click.option(
    "--plain",
    is_flag=True,
    default=False,
    help="Only print the style names.",
)
def styles_command(*, plain: bool = False) -> None:
    """List the registered named styles.

    Args:
        plain (bool): Print bare names instead of rendered samples.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: TinctConsole = ctx.obj["console"]

    styles = StyleRegistry.as_mapping()
    if plain:
        for name in sorted(styles):
            console.print(name)
        return

    width: int = max((len(name) for name in styles), default=0)
    for name in sorted(styles):
        style = styles[name]
        console.print(f"{paint(name, style):<{width}}  {style!r}")
