# tinct:header:start
#
#   project      : Tinct
#   file         : attributes.py
#   file_relpath : src/tinct/core/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Text attributes and rendering quirks.

`Attribute` members map to an SGR parameter (bold, underline, ...). `Quirk`
members never produce a code; they steer how `Painted` renders a value.

Both enums store their bit position as `_value_`, which is what `BitSet` uses
to pack them. `AttributeSet` and `QuirkSet` are the per-domain sets.

Example:
    ```python
    from tinct.core.attributes import Attribute, AttributeSet

    attrs = AttributeSet.EMPTY.insert(Attribute.UNDERLINE).insert(Attribute.BOLD)
    assert [a.sgr_parameter() for a in attrs] == ["1", "4"]
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from tinct.core.bitset import BitSet

if TYPE_CHECKING:
    from tinct.core.style import Style


def _member_for_mask(enum_cls: type[Enum], mask: int) -> Enum | None:
    """Return the member of `enum_cls` occupying the single bit `mask`."""
    # Exactly one bit must be set.
    if mask <= 0 or mask & (mask - 1):
        return None
    try:
        return enum_cls(mask.bit_length() - 1)
    except ValueError:
        return None


class Attribute(Enum):
    """Text attribute that maps to one SGR parameter.

    Each member is declared as ``(bit_position, sgr_code)``.
    """

    _value_: int
    code: int

    BOLD = (0, 1)
    DIM = (1, 2)
    ITALIC = (2, 3)
    UNDERLINE = (3, 4)
    BLINK = (4, 5)
    RAPID_BLINK = (5, 6)
    INVERT = (6, 7)
    CONCEAL = (7, 8)
    STRIKE = (8, 9)

    def __new__(cls, position: int, code: int) -> Attribute:
        """Construct an attribute member.

        Args:
            position (int): Bit position inside an `AttributeSet` (stored in `_value_`).
            code (int): The SGR parameter emitted for this attribute.

        Returns:
            Attribute: The newly constructed enum member.
        """
        obj: Attribute = object.__new__(cls)
        obj._value_ = position
        obj.code = code
        return obj

    @property
    def bit_mask(self) -> int:
        """Return ``1 << position``."""
        return 1 << self._value_

    @classmethod
    def from_bit_mask(cls, mask: int) -> Attribute | None:
        """Return the attribute whose bit equals `mask`, or None."""
        member = _member_for_mask(cls, mask)
        return member if isinstance(member, Attribute) else None

    def sgr_parameter(self) -> str:
        """Return the SGR parameter for this attribute as a decimal string."""
        return str(self.code)

    def style(self) -> Style:
        """Return a `Style` with only this attribute set."""
        from tinct.core.style import Style

        return Style().attr(self)


class Quirk(Enum):
    """Rendering directive consumed by `Style` and `Painted`; never emitted as a code.

    Attributes:
        MASK: Suppress the whole value when styling is disabled.
        WRAP: Rewrite embedded resets so they restore this style.
        LINGER: Do not emit the reset suffix.
        RESETTING: Always emit the reset suffix (wins over LINGER).
        CLEAR: Deprecated alias of RESETTING.
        BRIGHT: Brighten the foreground color at render time.
        ON_BRIGHT: Brighten the background color at render time.
    """

    MASK = 0
    WRAP = 1
    LINGER = 2
    RESETTING = 3
    CLEAR = 3
    BRIGHT = 4
    ON_BRIGHT = 5

    @property
    def bit_mask(self) -> int:
        """Return ``1 << position``."""
        return 1 << self._value_

    @classmethod
    def from_bit_mask(cls, mask: int) -> Quirk | None:
        """Return the quirk whose bit equals `mask`, or None."""
        member = _member_for_mask(cls, mask)
        return member if isinstance(member, Quirk) else None

    def style(self) -> Style:
        """Return a `Style` with only this quirk set."""
        from tinct.core.style import Style

        return Style().quirk(self)


class AttributeSet(BitSet[Attribute]):
    """Set of `Attribute` members."""

    __slots__ = ()

    member_type = Attribute
    max_value = Attribute.STRIKE.value


class QuirkSet(BitSet[Quirk]):
    """Set of `Quirk` members."""

    __slots__ = ()

    member_type = Quirk
    max_value = Quirk.ON_BRIGHT.value


AttributeSet.EMPTY = AttributeSet()
QuirkSet.EMPTY = QuirkSet()
