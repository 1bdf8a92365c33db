# tinct:header:start
#
#   project      : Tinct
#   file         : color.py
#   file_relpath : src/tinct/core/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Terminal color selectors and their SGR encoding.

A `Color` is context-free: whether it is emitted as a foreground or background
code is decided by the `Variant` passed to `Color.sgr_parameter()`.

Encoding:
    - Named colors: ``30..37`` (foreground), ``+10`` for background, ``+60``
      for the bright variants.
    - ``Primary`` (terminal default): ``39`` / ``49``.
    - Fixed (256-color index): ``38;5;n`` / ``48;5;n``.
    - Rgb (true color): ``38;2;r;g;b`` / ``48;2;r;g;b``.

Colors are also style builders: ``Color.RED.bold()`` is the same `Style` as
``Style().fg(Color.RED).bold()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, ClassVar

from tinct.core.builder import StyleBuilder

if TYPE_CHECKING:
    from tinct.core.application import Application
    from tinct.core.style import Style


class Variant(Enum):
    """Whether a color is emitted as a foreground or a background code."""

    FG = 0
    BG = 10


class ColorKind(IntEnum):
    """Color selector kinds, in declaration (and ordering) order."""

    PRIMARY = 0
    FIXED = 1
    RGB = 2
    BLACK = 3
    RED = 4
    GREEN = 5
    YELLOW = 6
    BLUE = 7
    MAGENTA = 8
    CYAN = 9
    WHITE = 10
    BRIGHT_BLACK = 11
    BRIGHT_RED = 12
    BRIGHT_GREEN = 13
    BRIGHT_YELLOW = 14
    BRIGHT_BLUE = 15
    BRIGHT_MAGENTA = 16
    BRIGHT_CYAN = 17
    BRIGHT_WHITE = 18


# Foreground base codes; backgrounds add Variant.BG.
_FG_BASE: dict[ColorKind, int] = {
    ColorKind.BLACK: 30,
    ColorKind.RED: 31,
    ColorKind.GREEN: 32,
    ColorKind.YELLOW: 33,
    ColorKind.BLUE: 34,
    ColorKind.MAGENTA: 35,
    ColorKind.CYAN: 36,
    ColorKind.WHITE: 37,
    ColorKind.FIXED: 38,
    ColorKind.RGB: 38,
    ColorKind.PRIMARY: 39,
    ColorKind.BRIGHT_BLACK: 30 + 60,
    ColorKind.BRIGHT_RED: 31 + 60,
    ColorKind.BRIGHT_GREEN: 32 + 60,
    ColorKind.BRIGHT_YELLOW: 33 + 60,
    ColorKind.BRIGHT_BLUE: 34 + 60,
    ColorKind.BRIGHT_MAGENTA: 35 + 60,
    ColorKind.BRIGHT_CYAN: 36 + 60,
    ColorKind.BRIGHT_WHITE: 37 + 60,
}

_TO_BRIGHT: dict[ColorKind, ColorKind] = {
    ColorKind.BLACK: ColorKind.BRIGHT_BLACK,
    ColorKind.RED: ColorKind.BRIGHT_RED,
    ColorKind.GREEN: ColorKind.BRIGHT_GREEN,
    ColorKind.YELLOW: ColorKind.BRIGHT_YELLOW,
    ColorKind.BLUE: ColorKind.BRIGHT_BLUE,
    ColorKind.MAGENTA: ColorKind.BRIGHT_MAGENTA,
    ColorKind.CYAN: ColorKind.BRIGHT_CYAN,
    ColorKind.WHITE: ColorKind.BRIGHT_WHITE,
}


def _check_byte(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")
    return value


@dataclass(frozen=True, order=True)
class Color(StyleBuilder["Style"]):
    """A terminal color selector.

    Use the named constants (`Color.RED`, `Color.BRIGHT_BLUE`, `Color.PRIMARY`,
    ...) or the `from_fixed()` / `from_rgb()` constructors.

    Attributes:
        kind (ColorKind): Which selector this is.
        params (tuple[int, ...]): The index for fixed colors, ``(r, g, b)`` for
            true colors, empty otherwise.
    """

    kind: ColorKind
    params: tuple[int, ...] = ()

    PRIMARY: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    BRIGHT_BLACK: ClassVar[Color]
    BRIGHT_RED: ClassVar[Color]
    BRIGHT_GREEN: ClassVar[Color]
    BRIGHT_YELLOW: ClassVar[Color]
    BRIGHT_BLUE: ClassVar[Color]
    BRIGHT_MAGENTA: ClassVar[Color]
    BRIGHT_CYAN: ClassVar[Color]
    BRIGHT_WHITE: ClassVar[Color]

    @classmethod
    def from_fixed(cls, index: int) -> Color:
        """Return an entry of the 256-color palette.

        Raises:
            ValueError: If `index` is outside ``0..255``.
        """
        return cls(ColorKind.FIXED, (_check_byte("index", index),))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Return a 24-bit true color.

        Raises:
            ValueError: If a channel is outside ``0..255``.
        """
        return cls(
            ColorKind.RGB,
            (_check_byte("r", r), _check_byte("g", g), _check_byte("b", b)),
        )

    def fg_base(self) -> int:
        """Return the foreground base code for this color."""
        return _FG_BASE[self.kind]

    def sgr_parameter(self, variant: Variant) -> str:
        """Return the SGR parameter(s) selecting this color.

        Args:
            variant (Variant): Foreground or background.

        Returns:
            str: e.g. ``"31"``, ``"48;5;200"`` or ``"38;2;70;130;180"``.
        """
        base: int = self.fg_base() + variant.value
        if self.kind is ColorKind.FIXED:
            return f"{base};5;{self.params[0]}"
        if self.kind is ColorKind.RGB:
            r, g, b = self.params
            return f"{base};2;{r};{g};{b}"
        return str(base)

    def to_bright(self) -> Color:
        """Return the bright counterpart of a named color.

        Primary, fixed, rgb and already-bright colors are returned unchanged.
        """
        bright: ColorKind | None = _TO_BRIGHT.get(self.kind)
        if bright is None:
            return self
        return Color(bright)

    def foreground(self) -> Style:
        """Return a `Style` with this color as foreground."""
        from tinct.core.style import Style

        return Style().fg(self)

    def background(self) -> Style:
        """Return a `Style` with this color as background."""
        from tinct.core.style import Style

        return Style().bg(self)

    def apply(self, application: Application) -> Style:
        """Start a style from this foreground color and apply `application`."""
        return self.foreground().apply(application)

    def __repr__(self) -> str:
        if self.kind is ColorKind.FIXED:
            return f"Color.from_fixed({self.params[0]})"
        if self.kind is ColorKind.RGB:
            return "Color.from_rgb({}, {}, {})".format(*self.params)
        return f"Color.{self.kind.name}"


Color.PRIMARY = Color(ColorKind.PRIMARY)
Color.BLACK = Color(ColorKind.BLACK)
Color.RED = Color(ColorKind.RED)
Color.GREEN = Color(ColorKind.GREEN)
Color.YELLOW = Color(ColorKind.YELLOW)
Color.BLUE = Color(ColorKind.BLUE)
Color.MAGENTA = Color(ColorKind.MAGENTA)
Color.CYAN = Color(ColorKind.CYAN)
Color.WHITE = Color(ColorKind.WHITE)
Color.BRIGHT_BLACK = Color(ColorKind.BRIGHT_BLACK)
Color.BRIGHT_RED = Color(ColorKind.BRIGHT_RED)
Color.BRIGHT_GREEN = Color(ColorKind.BRIGHT_GREEN)
Color.BRIGHT_YELLOW = Color(ColorKind.BRIGHT_YELLOW)
Color.BRIGHT_BLUE = Color(ColorKind.BRIGHT_BLUE)
Color.BRIGHT_MAGENTA = Color(ColorKind.BRIGHT_MAGENTA)
Color.BRIGHT_CYAN = Color(ColorKind.BRIGHT_CYAN)
Color.BRIGHT_WHITE = Color(ColorKind.BRIGHT_WHITE)
