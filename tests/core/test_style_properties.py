# tinct:header:start
#
#   project      : Tinct
#   file         : test_style_properties.py
#   file_relpath : tests/core/test_style_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

# pyright: strict

"""Property tests for style equality, ordering and rendering.

Checks that:
1) equality and hashing ignore quirks and conditions,
2) ordering is total and consistent with equality, and
3) disabled or wrapped rendering never leaks escape sequences.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings

from tests.strategies_tinct import PLAIN_TEXT, styles
from tinct.core import enablement
from tinct.core.attributes import Quirk
from tinct.core.condition import Condition
from tinct.core.painted import Painted, strip_ansi
from tinct.core.style import ESC, RESET, Style

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


def test_default_and_masked_styles_are_equal() -> None:
    a = Style()
    b = Style().mask()
    c = Style().whenever(Condition.NEVER)
    assert a == b == c
    assert hash(a) == hash(b) == hash(c)


@settings(max_examples=200)
@given(style=styles())
def test_quirks_and_condition_do_not_affect_equality(style: Style) -> None:
    stripped = Style(style.foreground, style.background, style.attributes)
    assert style == stripped
    assert hash(style) == hash(stripped)
    assert style.whenever(Condition.NEVER) == style


@settings(max_examples=200)
@given(a=styles(), b=styles())
def test_ordering_is_consistent_with_equality(a: Style, b: Style) -> None:
    assert (a == b) == (not a < b and not b < a)
    assert (a < b) != (a >= b)
    if a == b:
        assert hash(a) == hash(b)


@given(a=styles(), b=styles(), c=styles())
def test_ordering_is_transitive(a: Style, b: Style, c: Style) -> None:
    if a <= b and b <= c:
        assert a <= c


@given(style=styles(quirks=False), text=PLAIN_TEXT)
def test_enabled_render_is_prefix_text_suffix(style: Style, text: str) -> None:
    enablement.enable()
    rendered = str(Painted(text, style))
    assert rendered == style.prefix() + text + style.suffix()
    if style.is_empty():
        assert rendered == text
    else:
        assert rendered.startswith(ESC + "[")
        assert rendered.endswith(RESET)


@given(style=styles(), text=PLAIN_TEXT)
def test_disabled_render_is_the_plain_text(style: Style, text: str) -> None:
    painted = Painted(text, style)
    enablement.disable()
    expected = "" if style.has_quirk(Quirk.MASK) else text
    assert str(painted) == expected


@given(outer=styles(quirks=False), inner=styles(quirks=False), text=PLAIN_TEXT)
def test_wrapped_render_strips_to_the_text(outer: Style, inner: Style, text: str) -> None:
    enablement.enable()
    nested: str = f"<{Painted(text, inner)}>"
    wrapped = Painted(nested, outer.wrap())
    assert strip_ansi(str(wrapped)) == f"<{text}>"
    enablement.disable()
    assert str(wrapped) == f"<{text}>"
