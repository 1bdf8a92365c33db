# tinct:header:start
#
#   project      : Tinct
#   file         : application.py
#   file_relpath : src/tinct/core/application.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""The single vocabulary of style edits.

Every builder method (``red()``, ``bold()``, ``mask()``, ``whenever()``, ...)
is expressed as one `Application`, and every composable type funnels it through
its own ``apply()``. This keeps composition and ordering semantics identical
across `Style`, `Color` and `Painted`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinct.core.attributes import Attribute, Quirk
    from tinct.core.color import Color
    from tinct.core.condition import Condition


class ApplicationKind(Enum):
    """What an `Application` changes on a style."""

    FG = "fg"
    BG = "bg"
    ATTR = "attr"
    QUIRK = "quirk"
    WHENEVER = "whenever"


@dataclass(frozen=True)
class Application:
    """One edit to a style: set a color or condition, or add an attribute or quirk.

    Attributes:
        kind (ApplicationKind): The edit to perform.
        value (Color | Attribute | Quirk | Condition): Its operand.
    """

    kind: ApplicationKind
    value: Color | Attribute | Quirk | Condition

    @classmethod
    def fg(cls, color: Color) -> Application:
        """Set the foreground color."""
        return cls(ApplicationKind.FG, color)

    @classmethod
    def bg(cls, color: Color) -> Application:
        """Set the background color."""
        return cls(ApplicationKind.BG, color)

    @classmethod
    def attr(cls, attribute: Attribute) -> Application:
        """Add an attribute."""
        return cls(ApplicationKind.ATTR, attribute)

    @classmethod
    def quirk(cls, quirk: Quirk) -> Application:
        """Add a quirk."""
        return cls(ApplicationKind.QUIRK, quirk)

    @classmethod
    def whenever(cls, condition: Condition) -> Application:
        """Set the enabling condition."""
        return cls(ApplicationKind.WHENEVER, condition)
