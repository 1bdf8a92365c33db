# tinct:header:start
#
#   project      : Tinct
#   file         : demo.py
#   file_relpath : src/tinct/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct `demo` command.

Prints a showcase of colors, attributes and quirks, useful to check what a
terminal supports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tinct.core.color import Color
from tinct.registry.styles import StyleRegistry
from tinct.shortcuts import paint

if TYPE_CHECKING:
    from tinct.cli.console import TinctConsole


_ROWS: tuple[tuple[str, Color], ...] = (
    ("blue", Color.BLUE),
    ("red", Color.RED),
    ("yellow", Color.YELLOW),
    ("green", Color.GREEN),
    ("magenta", Color.MAGENTA),
    ("cyan", Color.CYAN),
    ("black", Color.BLACK),
)


def _color_rows(console: TinctConsole) -> None:
    for name, color in _ROWS:
        plain = paint(name).fg(color)
        dim = paint(f"dim {name}").fg(color).dim()
        bright = paint(f"bright {name}").bright().fg(color)
        console.print(f"{plain}, {dim}, {bright}")


@click.command(
    name="demo",
    help="Print a showcase of colors, attributes and quirks.",
)
def demo_command() -> None:
    """Print a showcase of colors, attributes and quirks."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: TinctConsole = ctx.obj["console"]

    x = paint("this is x").red().italic()
    y = paint("now y").blue().bold().blink().italic().bg(Color.WHITE)
    z = paint("finally z").blue().bold().bg(Color.RED)
    console.print(f"{x!r}, {y!r}, {z!r}")
    console.print(f"xyz {x}, {y}, {z}")
    console.print(f"bright xyz {x.bright()}, {y.bright()}, {z.bright().dim()}")

    _color_rows(console)

    alert = StyleRegistry.require("alert")
    stop = Color.RED
    wait = Color.YELLOW.bold().underline()
    go = Color.GREEN.italic().on_black()
    console.print(
        f"Testing, {paint(1, alert).paint(stop)}, {paint(2, wait)}, {paint('3', go).mask()}!"
    )
    console.print(
        f"Testing, {paint(1).red()}, {paint(2).yellow().bold().underline()}, "
        f"{paint('3').green().on_white().italic()}!"
    )

    normal = paint("Normal").primary().on_black()
    console.print(normal)
    console.print(normal.on_bright())
    console.print(normal.invert().on_bright())
    console.print(normal.invert().invert().on_bright())
    console.print(normal.strike().blink().rapid_blink().conceal())
    console.print(paint("primary on primary").primary().on_primary().invert())

    console.print(f"go to {paint('the docs').green().italic().link('https://example.com')}, please")

    inner = f"{paint('Stop').red()} and {paint('Go').green()}"
    console.print(f"Hey! {paint(inner).blue()}")
    console.print(f"Hey! {paint(inner).blue().wrap()}")

    console.print(
        f"Testing, {paint('Ready').bold()}, {paint('Set').yellow().italic().bold()}, "
        f"{paint('STOP').white().on_red().bright().underline().bold()}!"
    )
