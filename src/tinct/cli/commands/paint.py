# tinct:header:start
#
#   project      : Tinct
#   file         : paint.py
#   file_relpath : src/tinct/cli/commands/paint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct `paint` command.

Prints TEXT with the requested styling:

    tinct paint --fg red --attr bold "Stop"
    tinct paint --style alert --link https://example.com "Read me"

The explicit options are applied on top of ``--style``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tinct.cli.cli_types import attribute_param, color_param, quirk_param
from tinct.cli.errors import TinctUsageError
from tinct.config.logging import get_logger
from tinct.core.style import Style
from tinct.errors import UnknownStyleError
from tinct.registry.styles import StyleRegistry
from tinct.shortcuts import paint

if TYPE_CHECKING:
    from tinct.cli.console import TinctConsole
    from tinct.config.logging import TinctLogger
    from tinct.core.attributes import Attribute, Quirk
    from tinct.core.color import Color

logger: TinctLogger = get_logger(__name__)


@click.command(
    name="paint",
    help="Print TEXT with the given styling.",
)
@click.argument("text", nargs=-1, required=True)
@click.option("--fg", type=color_param("fg"), default=None, help="Foreground color.")
@click.option("--bg", type=color_param("bg"), default=None, help="Background color.")
@click.option(
    "--attr",
    "attributes",
    type=attribute_param(),
    multiple=True,
    help="Text attribute (bold, italic, ...). Repeatable.",
)
@click.option(
    "--quirk",
    "quirks",
    type=quirk_param(),
    multiple=True,
    help="Rendering quirk (mask, wrap, linger, ...). Repeatable.",
)
@click.option(
    "--style",
    "style_name",
    default=None,
    help="Start from a registered named style (see `tinct styles`).",
)
@click.option("--link", "url", default=None, help="Render the text as a hyperlink to URL.")
@click.option(
    "-n",
    "--no-newline",
    is_flag=True,
    default=False,
    help="Do not print the trailing newline.",
)
def paint_command(
    *,
    text: tuple[str, ...],
    fg: Color | None,
    bg: Color | None,
    attributes: tuple[Attribute, ...],
    quirks: tuple[Quirk, ...],
    style_name: str | None,
    url: str | None,
    no_newline: bool,
) -> None:
    """Print text with the given styling."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: TinctConsole = ctx.obj["console"]

    style = Style()
    if style_name is not None:
        try:
            style = StyleRegistry.require(style_name)
        except UnknownStyleError as exc:
            raise TinctUsageError(str(exc)) from exc

    if fg is not None:
        style = style.fg(fg)
    if bg is not None:
        style = style.bg(bg)
    for attribute in attributes:
        style = style.attr(attribute)
    for quirk in quirks:
        style = style.quirk(quirk)
    logger.debug("painting with %r", style)

    painted = paint(" ".join(text), style)
    console.print(painted.link(url) if url else painted, nl=not no_newline)
