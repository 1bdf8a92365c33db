# tinct:header:start
#
#   project      : Tinct
#   file         : shortcuts.py
#   file_relpath : src/tinct/shortcuts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Module-level shortcuts for painting a value.

Each function is sugar for ``paint(value).<builder>()``:

    ```python
    from tinct import bold, red, rgb

    print(red("error"), bold("note"), rgb(70, 130, 180, "steel"))
    ```
"""

from __future__ import annotations

from typing import TypeVar

from tinct.core.painted import Painted
from tinct.core.style import Style

T = TypeVar("T")


def paint(value: T, style: Style | None = None) -> Painted[T]:
    """Wrap `value` so it renders with `style` (unstyled by default).

    Args:
        value (T): Any value that supports ``format()``.
        style (Style | None): The style to apply; None means the empty style.

    Returns:
        Painted[T]: The painted value.
    """
    if style is None:
        return Painted(value)
    return Painted(value, Style.coerce(style))


# --- Foreground colors --------------------------------------------------------


def primary(value: T) -> Painted[T]:
    """Paint `value` in the terminal's default foreground color."""
    return paint(value).primary()


def fixed(index: int, value: T) -> Painted[T]:
    """Paint `value` with entry `index` of the 256-color palette."""
    return paint(value).fixed(index)


def rgb(r: int, g: int, b: int, value: T) -> Painted[T]:
    """Paint `value` in a 24-bit color."""
    return paint(value).rgb(r, g, b)


def black(value: T) -> Painted[T]:
    """Return `paint(value).black()`."""
    return paint(value).black()


def red(value: T) -> Painted[T]:
    """Return `paint(value).red()`."""
    return paint(value).red()


def green(value: T) -> Painted[T]:
    """Return `paint(value).green()`."""
    return paint(value).green()


def yellow(value: T) -> Painted[T]:
    """Return `paint(value).yellow()`."""
    return paint(value).yellow()


def blue(value: T) -> Painted[T]:
    """Return `paint(value).blue()`."""
    return paint(value).blue()


def magenta(value: T) -> Painted[T]:
    """Return `paint(value).magenta()`."""
    return paint(value).magenta()


def cyan(value: T) -> Painted[T]:
    """Return `paint(value).cyan()`."""
    return paint(value).cyan()


def white(value: T) -> Painted[T]:
    """Return `paint(value).white()`."""
    return paint(value).white()


def bright_black(value: T) -> Painted[T]:
    """Return `paint(value).bright_black()`."""
    return paint(value).bright_black()


def bright_red(value: T) -> Painted[T]:
    """Return `paint(value).bright_red()`."""
    return paint(value).bright_red()


def bright_green(value: T) -> Painted[T]:
    """Return `paint(value).bright_green()`."""
    return paint(value).bright_green()


def bright_yellow(value: T) -> Painted[T]:
    """Return `paint(value).bright_yellow()`."""
    return paint(value).bright_yellow()


def bright_blue(value: T) -> Painted[T]:
    """Return `paint(value).bright_blue()`."""
    return paint(value).bright_blue()


def bright_magenta(value: T) -> Painted[T]:
    """Return `paint(value).bright_magenta()`."""
    return paint(value).bright_magenta()


def bright_cyan(value: T) -> Painted[T]:
    """Return `paint(value).bright_cyan()`."""
    return paint(value).bright_cyan()


def bright_white(value: T) -> Painted[T]:
    """Return `paint(value).bright_white()`."""
    return paint(value).bright_white()


# --- Attributes ---------------------------------------------------------------


def bold(value: T) -> Painted[T]:
    """Return `paint(value).bold()`."""
    return paint(value).bold()


def dim(value: T) -> Painted[T]:
    """Return `paint(value).dim()`."""
    return paint(value).dim()


def italic(value: T) -> Painted[T]:
    """Return `paint(value).italic()`."""
    return paint(value).italic()


def underline(value: T) -> Painted[T]:
    """Return `paint(value).underline()`."""
    return paint(value).underline()


def blink(value: T) -> Painted[T]:
    """Return `paint(value).blink()`."""
    return paint(value).blink()


def rapid_blink(value: T) -> Painted[T]:
    """Return `paint(value).rapid_blink()`."""
    return paint(value).rapid_blink()


def invert(value: T) -> Painted[T]:
    """Return `paint(value).invert()`."""
    return paint(value).invert()


def conceal(value: T) -> Painted[T]:
    """Return `paint(value).conceal()`."""
    return paint(value).conceal()


def strike(value: T) -> Painted[T]:
    """Return `paint(value).strike()`."""
    return paint(value).strike()


# --- Quirks -------------------------------------------------------------------


def mask(value: T) -> Painted[T]:
    """Paint `value` so that it disappears entirely while styling is disabled."""
    return paint(value).mask()


def wrap(value: T) -> Painted[T]:
    """Paint `value` so that styled text nested inside it restores the outer style."""
    return paint(value).wrap()


def linger(value: T) -> Painted[T]:
    """Paint `value` without a trailing reset."""
    return paint(value).linger()


def resetting(value: T) -> Painted[T]:
    """Paint `value` with a trailing reset, even when unstyled."""
    return paint(value).resetting()


def bright(value: T) -> Painted[T]:
    """Return `paint(value).bright()`."""
    return paint(value).bright()


def on_bright(value: T) -> Painted[T]:
    """Return `paint(value).on_bright()`."""
    return paint(value).on_bright()
