# tinct:header:start
#
#   project      : Tinct
#   file         : builder.py
#   file_relpath : src/tinct/core/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Chainable style-builder methods shared by `Style`, `Color` and `Painted`.

`StyleBuilder` is a mixin with a single required method, ``apply()``. Every
builder method is a thin wrapper that turns its arguments into an
`Application` and hands it to ``apply()``, so each composable type only has to
say how it absorbs one edit:

    - `Style.apply()` returns the updated style.
    - `Color.apply()` starts ``Style().fg(color)`` and applies the edit.
    - `Painted.apply()` returns the same value with an updated style.

Colors and conditions follow last-write-wins; attributes and quirks are
accumulated as a set, so repeating a builder is idempotent.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Generic, TypeVar

from tinct.core.application import Application
from tinct.core.attributes import Attribute, Quirk

if TYPE_CHECKING:
    from tinct.core.condition import Condition

R = TypeVar("R")


class StyleBuilder(Generic[R]):
    """Mixin providing every style builder method on top of ``apply()``."""

    __slots__ = ()

    def apply(self, application: Application) -> R:
        """Absorb one style edit. Implemented by each composable type."""
        raise NotImplementedError

    # --- Generic edits ------------------------------------------------------

    def fg(self, color: Color) -> R:
        """Set the foreground color."""
        return self.apply(Application.fg(color))

    def bg(self, color: Color) -> R:
        """Set the background color."""
        return self.apply(Application.bg(color))

    def attr(self, attribute: Attribute) -> R:
        """Add a text attribute."""
        return self.apply(Application.attr(attribute))

    def quirk(self, quirk: Quirk) -> R:
        """Add a rendering quirk."""
        return self.apply(Application.quirk(quirk))

    def whenever(self, condition: Condition) -> R:
        """Only emit styling when `condition` evaluates to True."""
        return self.apply(Application.whenever(condition))

    # --- Foreground colors --------------------------------------------------

    def primary(self) -> R:
        """Use the terminal's default foreground color."""
        return self.fg(Color.PRIMARY)

    def fixed(self, index: int) -> R:
        """Use entry `index` of the 256-color palette as foreground."""
        return self.fg(Color.from_fixed(index))

    def rgb(self, r: int, g: int, b: int) -> R:
        """Use a 24-bit foreground color."""
        return self.fg(Color.from_rgb(r, g, b))

    def black(self) -> R:
        """Set the foreground to black."""
        return self.fg(Color.BLACK)

    def red(self) -> R:
        """Set the foreground to red."""
        return self.fg(Color.RED)

    def green(self) -> R:
        """Set the foreground to green."""
        return self.fg(Color.GREEN)

    def yellow(self) -> R:
        """Set the foreground to yellow."""
        return self.fg(Color.YELLOW)

    def blue(self) -> R:
        """Set the foreground to blue."""
        return self.fg(Color.BLUE)

    def magenta(self) -> R:
        """Set the foreground to magenta."""
        return self.fg(Color.MAGENTA)

    def cyan(self) -> R:
        """Set the foreground to cyan."""
        return self.fg(Color.CYAN)

    def white(self) -> R:
        """Set the foreground to white."""
        return self.fg(Color.WHITE)

    def bright_black(self) -> R:
        """Set the foreground to bright black."""
        return self.fg(Color.BRIGHT_BLACK)

    def bright_red(self) -> R:
        """Set the foreground to bright red."""
        return self.fg(Color.BRIGHT_RED)

    def bright_green(self) -> R:
        """Set the foreground to bright green."""
        return self.fg(Color.BRIGHT_GREEN)

    def bright_yellow(self) -> R:
        """Set the foreground to bright yellow."""
        return self.fg(Color.BRIGHT_YELLOW)

    def bright_blue(self) -> R:
        """Set the foreground to bright blue."""
        return self.fg(Color.BRIGHT_BLUE)

    def bright_magenta(self) -> R:
        """Set the foreground to bright magenta."""
        return self.fg(Color.BRIGHT_MAGENTA)

    def bright_cyan(self) -> R:
        """Set the foreground to bright cyan."""
        return self.fg(Color.BRIGHT_CYAN)

    def bright_white(self) -> R:
        """Set the foreground to bright white."""
        return self.fg(Color.BRIGHT_WHITE)

    # --- Background colors --------------------------------------------------

    def on_primary(self) -> R:
        """Use the terminal's default background color."""
        return self.bg(Color.PRIMARY)

    def on_fixed(self, index: int) -> R:
        """Use entry `index` of the 256-color palette as background."""
        return self.bg(Color.from_fixed(index))

    def on_rgb(self, r: int, g: int, b: int) -> R:
        """Use a 24-bit background color."""
        return self.bg(Color.from_rgb(r, g, b))

    def on_black(self) -> R:
        """Set the background to black."""
        return self.bg(Color.BLACK)

    def on_red(self) -> R:
        """Set the background to red."""
        return self.bg(Color.RED)

    def on_green(self) -> R:
        """Set the background to green."""
        return self.bg(Color.GREEN)

    def on_yellow(self) -> R:
        """Set the background to yellow."""
        return self.bg(Color.YELLOW)

    def on_blue(self) -> R:
        """Set the background to blue."""
        return self.bg(Color.BLUE)

    def on_magenta(self) -> R:
        """Set the background to magenta."""
        return self.bg(Color.MAGENTA)

    def on_cyan(self) -> R:
        """Set the background to cyan."""
        return self.bg(Color.CYAN)

    def on_white(self) -> R:
        """Set the background to white."""
        return self.bg(Color.WHITE)

    def on_bright_black(self) -> R:
        """Set the background to bright black."""
        return self.bg(Color.BRIGHT_BLACK)

    def on_bright_red(self) -> R:
        """Set the background to bright red."""
        return self.bg(Color.BRIGHT_RED)

    def on_bright_green(self) -> R:
        """Set the background to bright green."""
        return self.bg(Color.BRIGHT_GREEN)

    def on_bright_yellow(self) -> R:
        """Set the background to bright yellow."""
        return self.bg(Color.BRIGHT_YELLOW)

    def on_bright_blue(self) -> R:
        """Set the background to bright blue."""
        return self.bg(Color.BRIGHT_BLUE)

    def on_bright_magenta(self) -> R:
        """Set the background to bright magenta."""
        return self.bg(Color.BRIGHT_MAGENTA)

    def on_bright_cyan(self) -> R:
        """Set the background to bright cyan."""
        return self.bg(Color.BRIGHT_CYAN)

    def on_bright_white(self) -> R:
        """Set the background to bright white."""
        return self.bg(Color.BRIGHT_WHITE)

    # --- Attributes ---------------------------------------------------------

    def bold(self) -> R:
        """Render in bold or increased intensity."""
        return self.attr(Attribute.BOLD)

    def dim(self) -> R:
        """Render faint (decreased intensity)."""
        return self.attr(Attribute.DIM)

    def italic(self) -> R:
        """Render in italics."""
        return self.attr(Attribute.ITALIC)

    def underline(self) -> R:
        """Underline the text."""
        return self.attr(Attribute.UNDERLINE)

    def blink(self) -> R:
        """Blink slowly."""
        return self.attr(Attribute.BLINK)

    def rapid_blink(self) -> R:
        """Blink rapidly; few terminals support it."""
        return self.attr(Attribute.RAPID_BLINK)

    def invert(self) -> R:
        """Swap the foreground and background colors."""
        return self.attr(Attribute.INVERT)

    def conceal(self) -> R:
        """Hide the text."""
        return self.attr(Attribute.CONCEAL)

    def strike(self) -> R:
        """Strike the text through."""
        return self.attr(Attribute.STRIKE)

    # --- Quirks -------------------------------------------------------------

    def mask(self) -> R:
        """Render nothing at all while styling is disabled."""
        return self.quirk(Quirk.MASK)

    def wrap(self) -> R:
        """Make resets embedded in the value restore this style."""
        return self.quirk(Quirk.WRAP)

    def linger(self) -> R:
        """Leave the style active after the value (no reset suffix)."""
        return self.quirk(Quirk.LINGER)

    def resetting(self) -> R:
        """Always emit a reset after the value, even for an empty style."""
        return self.quirk(Quirk.RESETTING)

    def clear(self) -> R:
        """Deprecated alias of `resetting()`."""
        warnings.warn(
            "`clear()` is deprecated; use `resetting()` instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.quirk(Quirk.CLEAR)

    def bright(self) -> R:
        """Render the foreground color in its bright variant."""
        return self.quirk(Quirk.BRIGHT)

    def on_bright(self) -> R:
        """Render the background color in its bright variant."""
        return self.quirk(Quirk.ON_BRIGHT)


# Imported last: `Color` itself derives from `StyleBuilder`.
from tinct.core.color import Color  # noqa: E402
