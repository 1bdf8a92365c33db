# tinct:header:start
#
#   project      : Tinct
#   file         : strategies_tinct.py
#   file_relpath : tests/strategies_tinct.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

# pyright: strict

"""Hypothesis strategies for generating colors, styles and painted text."""

from __future__ import annotations

from hypothesis import strategies as st

from tinct.core.attributes import Attribute, Quirk
from tinct.core.color import Color, ColorKind
from tinct.core.style import Style

_PARAMETRIC: frozenset[ColorKind] = frozenset({ColorKind.FIXED, ColorKind.RGB})

BYTES: st.SearchStrategy[int] = st.integers(min_value=0, max_value=255)

NAMED_COLORS: st.SearchStrategy[Color] = st.sampled_from(
    [Color(kind) for kind in ColorKind if kind not in _PARAMETRIC]
)

COLORS: st.SearchStrategy[Color] = st.one_of(
    NAMED_COLORS,
    BYTES.map(Color.from_fixed),
    st.tuples(BYTES, BYTES, BYTES).map(lambda rgb: Color.from_rgb(*rgb)),
)

# Text without ESC, so rendered output can be split back into its parts.
PLAIN_TEXT: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(
        blacklist_categories=("Cs",), blacklist_characters="\x1b", max_codepoint=0x00FF
    ),
    max_size=40,
)


@st.composite
def styles(draw: st.DrawFn, *, quirks: bool = True) -> Style:
    """Draw a style with optional colors, any attributes and (optionally) quirks."""
    style = Style()
    foreground: Color | None = draw(st.none() | COLORS)
    background: Color | None = draw(st.none() | COLORS)
    if foreground is not None:
        style = style.fg(foreground)
    if background is not None:
        style = style.bg(background)
    for attribute in draw(st.lists(st.sampled_from(list(Attribute)), max_size=4)):
        style = style.attr(attribute)
    if quirks:
        for quirk in draw(st.lists(st.sampled_from(list(Quirk)), max_size=3)):
            style = style.quirk(quirk)
    return style
