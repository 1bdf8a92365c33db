# tinct:header:start
#
#   project      : Tinct
#   file         : bitset.py
#   file_relpath : src/tinct/core/bitset.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Compact sets of small enum members packed into a 16-bit mask.

Key types:
    - `SetMember`: Protocol for enum members that map to exactly one bit.
    - `BitSet`: Immutable set backed by a single `int` mask. Concrete,
      per-domain subclasses (`AttributeSet`, `QuirkSet`) bind the member type.

Design:
    The member-to-bit mapping is baked into each member's `_value_` (its bit
    position), so iteration never reflects over enum internals: it walks bit
    positions `0..max_value` and asks the member type for the matching member.
    Iteration order is therefore declaration order, which keeps rendered SGR
    sequences stable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Final, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

MAX_BITS: Final[int] = 16


class SetMember(Protocol):
    """A member that occupies exactly one bit of a `BitSet` mask."""

    @property
    def bit_mask(self) -> int:
        """Return ``1 << position`` for this member."""
        ...

    @classmethod
    def from_bit_mask(cls, mask: int) -> SetMember | None:
        """Return the member whose bit equals `mask`, or None for no match."""
        ...


M = TypeVar("M", bound=SetMember)
_BS = TypeVar("_BS", bound="BitSet")  # type: ignore[type-arg]


class BitSet(Generic[M]):
    """Immutable set of members stored as one unsigned 16-bit mask.

    Subclasses set `member_type` to the enum whose members they hold, `max_value`
    to the highest bit position in use, and expose an `EMPTY` constant. Equality,
    ordering and hashing only consider the mask.
    """

    __slots__ = ("_mask",)

    member_type: ClassVar[type]
    max_value: ClassVar[int] = MAX_BITS - 1
    EMPTY: ClassVar[BitSet]  # type: ignore[type-arg]

    def __init__(self, mask: int = 0) -> None:
        if not 0 <= mask < (1 << MAX_BITS):
            raise ValueError(f"mask {mask:#x} does not fit in {MAX_BITS} bits")
        self._mask = mask

    @property
    def mask(self) -> int:
        """Return the raw bit mask."""
        return self._mask

    def insert(self: _BS, member: M) -> _BS:
        """Return a new set with `member` added.

        Args:
            member (M): The member to add.

        Returns:
            BitSet: A set of the same concrete type containing `member`.

        Raises:
            TypeError: If `member` is not an instance of `member_type`.
        """
        if not isinstance(member, self.member_type):
            raise TypeError(
                f"{type(self).__name__} holds {self.member_type.__name__} members,"
                f" got {type(member).__name__}"
            )
        return type(self)(self._mask | member.bit_mask)

    def contains(self, member: M) -> bool:
        """Return True if `member` is in the set."""
        bit: int = member.bit_mask
        return (self._mask & bit) == bit

    def iter(self) -> Iterator[M]:
        """Yield members in ascending bit-position (declaration) order.

        Every call starts a fresh walk over the mask.
        """
        from_bit_mask = self.member_type.from_bit_mask  # type: ignore[attr-defined]
        for index in range(self.max_value + 1):
            member: M | None = from_bit_mask(1 << index)
            if member is not None and self.contains(member):
                yield member

    def is_empty(self) -> bool:
        """Return True if no member is set."""
        return self._mask == 0

    def __iter__(self) -> Iterator[M]:
        return self.iter()

    def __contains__(self, member: object) -> bool:
        if not isinstance(member, self.member_type):
            return False
        return self.contains(member)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return sum(1 for _ in self.iter())

    def __bool__(self) -> bool:
        return self._mask != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return type(self) is type(other) and self._mask == other._mask

    def __lt__(self, other: BitSet[M]) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._mask < other._mask

    def __le__(self, other: BitSet[M]) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._mask <= other._mask

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._mask))

    def __repr__(self) -> str:
        members: str = ", ".join(str(m) for m in self.iter())
        return "{" + members + "}"
