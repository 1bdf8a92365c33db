# tinct:header:start
#
#   project      : Tinct
#   file         : style.py
#   file_relpath : src/tinct/core/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Immutable style values and their SGR prefix/suffix rendering.

A `Style` bundles an optional foreground and background `Color`, a set of
`Attribute` members, a set of `Quirk` members and an optional `Condition`.
All builder methods return new values; nothing is mutated in place.

Rendering contract:
    - The all-empty style renders an empty prefix (never a bare ``ESC[m``).
    - Otherwise the prefix is ``ESC[`` + codes + ``m`` where codes are, in
      order: attributes (declaration order), background, foreground.
    - The suffix is ``ESC[0m`` unless the style is empty or lingers; the
      ``RESETTING`` quirk forces it in every case.

Equality:
    Two styles are equal when foreground, background and attributes match.
    Quirks and the condition only change *how* a style is rendered, so they are
    ignored by ``==``, ``hash()`` and ordering.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field, replace
from functools import total_ordering
from typing import TYPE_CHECKING, Any, Final, Protocol

from tinct.core.application import ApplicationKind
from tinct.core.attributes import Attribute, AttributeSet, Quirk, QuirkSet
from tinct.core.builder import StyleBuilder
from tinct.core.color import Color, Variant
from tinct.core.condition import Condition

if TYPE_CHECKING:
    from tinct.core.application import Application

ESC: Final[str] = "\x1b"
CSI: Final[str] = ESC + "["
RESET: Final[str] = CSI + "0m"


class TextSink(Protocol):
    """Anything text can be written to (``io.StringIO``, ``sys.stdout``, ...)."""

    def write(self, s: str, /) -> Any:
        """Write `s`; failures are raised, not returned."""
        ...


def _color_key(color: Color | None) -> tuple[bool, Color | None]:
    # None sorts before every color.
    return (color is not None, color)


@total_ordering
@dataclass(frozen=True, eq=False)
class Style(StyleBuilder["Style"]):
    """The complete, immutable description of how to decorate one rendering.

    Attributes:
        foreground (Color | None): Foreground color, if any.
        background (Color | None): Background color, if any.
        attributes (AttributeSet): Text attributes.
        quirks (QuirkSet): Rendering directives (not part of equality).
        condition (Condition | None): Local enabling condition; None means
            always enabled (not part of equality).
    """

    foreground: Color | None = None
    background: Color | None = None
    attributes: AttributeSet = field(default_factory=lambda: AttributeSet.EMPTY)
    quirks: QuirkSet = field(default_factory=lambda: QuirkSet.EMPTY)
    condition: Condition | None = None

    # --- Composition --------------------------------------------------------

    def apply(self, application: Application) -> Style:
        """Return a copy of this style with one edit applied.

        Args:
            application (Application): The edit; colors and the condition are
                replaced, attributes and quirks are added.

        Returns:
            Style: The updated style.

        Raises:
            TypeError: If the edit's value does not fit its kind, e.g. a
                `Quirk` passed to `attr()`.
        """
        value = application.value
        match application.kind:
            case ApplicationKind.FG | ApplicationKind.BG if not isinstance(value, Color):
                raise TypeError(f"expected a Color, got {type(value).__name__}")
            case ApplicationKind.FG:
                return replace(self, foreground=value)
            case ApplicationKind.BG:
                return replace(self, background=value)
            case ApplicationKind.ATTR:
                return replace(self, attributes=self.attributes.insert(value))
            case ApplicationKind.QUIRK:
                return replace(self, quirks=self.quirks.insert(value))
            case ApplicationKind.WHENEVER:
                if not isinstance(value, Condition):
                    raise TypeError(f"expected a Condition, got {type(value).__name__}")
                return replace(self, condition=value)
        raise ValueError(f"unknown application kind: {application.kind!r}")

    @classmethod
    def coerce(cls, value: object) -> Style:
        """Convert a `Style`, `Color`, `Attribute`, `Quirk` or painted value into a `Style`.

        Raises:
            TypeError: If `value` has no style representation.
        """
        if isinstance(value, Style):
            return value
        if isinstance(value, Color):
            return value.foreground()
        if isinstance(value, (Attribute, Quirk)):
            return value.style()
        style = getattr(value, "style", None)
        if isinstance(style, Style):
            return style
        raise TypeError(f"cannot convert {type(value).__name__} to Style")

    # --- Queries ------------------------------------------------------------

    def enabled(self) -> bool:
        """Evaluate the local condition; a style without one is always enabled."""
        return self.condition is None or self.condition()

    def has_quirk(self, quirk: Quirk) -> bool:
        """Return True if `quirk` is set."""
        return self.quirks.contains(quirk)

    def is_empty(self) -> bool:
        """Return True if the style requests no colors and no attributes."""
        return self == _EMPTY

    # --- Rendering ----------------------------------------------------------

    def fmt_prefix(self, sink: TextSink) -> None:
        """Write the SGR sequence that starts this style to `sink`.

        Nothing is written for an empty style. Sink errors propagate.
        """
        if self.is_empty():
            return

        codes: list[str] = [attr.sgr_parameter() for attr in self.attributes]

        background: Color | None = self.background
        if background is not None:
            if self.quirks.contains(Quirk.ON_BRIGHT):
                background = background.to_bright()
            codes.append(background.sgr_parameter(Variant.BG))

        foreground: Color | None = self.foreground
        if foreground is not None:
            if self.quirks.contains(Quirk.BRIGHT):
                foreground = foreground.to_bright()
            codes.append(foreground.sgr_parameter(Variant.FG))

        sink.write(CSI + ";".join(codes) + "m")

    def prefix(self) -> str:
        """Return the SGR sequence that starts this style (may be empty)."""
        buf = io.StringIO()
        self.fmt_prefix(buf)
        return buf.getvalue()

    def _needs_reset(self) -> bool:
        if self.quirks.contains(Quirk.RESETTING):
            return True
        return not (self.quirks.contains(Quirk.LINGER) or self.is_empty())

    def fmt_suffix(self, sink: TextSink) -> None:
        """Write the reset sequence that ends this style to `sink`, if any."""
        if self._needs_reset():
            sink.write(RESET)

    def suffix(self) -> str:
        """Return the reset sequence that ends this style (may be empty)."""
        return RESET if self._needs_reset() else ""

    # --- Equality & ordering ------------------------------------------------

    def _key(self) -> tuple[Any, ...]:
        return (
            _color_key(self.foreground),
            _color_key(self.background),
            self.attributes,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return (
            self.foreground == other.foreground
            and self.background == other.background
            and self.attributes == other.attributes
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((self.foreground, self.background, self.attributes))


_EMPTY: Final[Style] = Style()
