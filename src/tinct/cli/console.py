# tinct:header:start
#
#   project      : Tinct
#   file         : console.py
#   file_relpath : src/tinct/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Console abstraction for user-facing program output.

This module provides a `TinctConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from tinct.registry.styles import StyleRegistry
from tinct.shortcuts import paint

if TYPE_CHECKING:
    from tinct.core.style import Style


class TinctConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, ANSI sequences are written through.
            Otherwise, Click strips them from the output.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.

    Attributes:
        enable_color (bool): Whether to emit ANSI sequences.
        out (TextIO | None): Stream for standard output.
        err (TextIO | None): Stream for error output.
    """

    enable_color: bool
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: object = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (object): Message; painted values are rendered with ``str()``.
            nl (bool): If True, append a newline.
        """
        click.echo(str(text), nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr, in the ``warning`` style."""
        click.echo(
            self.styled(text, "warning"),
            nl=nl,
            file=self.err,
            color=self.enable_color,
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr, in the ``error`` style."""
        click.echo(
            self.styled(text, "error"),
            nl=nl,
            file=self.err,
            color=self.enable_color,
        )

    def styled(self, text: str, style: Style | str) -> str:
        """Return `text` rendered with `style`.

        Args:
            text (str): Text to style.
            style (Style | str): A style, or the name of a registered style.
                Unknown names leave the text unstyled.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if isinstance(style, str):
            resolved: Style | None = StyleRegistry.get(style)
            if resolved is None:
                return text
            style = resolved
        if not self.enable_color:
            return text
        return str(paint(text, style))
