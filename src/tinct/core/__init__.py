# tinct:header:start
#
#   project      : Tinct
#   file         : __init__.py
#   file_relpath : src/tinct/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct core engine: colors, attributes, styles and the rendering wrapper.

The core performs no I/O beyond the one-time terminal probe and never raises
the configuration errors of `tinct.errors`.
"""

from __future__ import annotations

# `builder` must load before `color`: Color derives from StyleBuilder.
from tinct.core import builder  # noqa: F401  # isort: skip
from tinct.core.application import Application, ApplicationKind
from tinct.core.attributes import Attribute, AttributeSet, Quirk, QuirkSet
from tinct.core.bitset import BitSet
from tinct.core.builder import StyleBuilder
from tinct.core.cached import CachedBool
from tinct.core.color import Color, ColorKind, Variant
from tinct.core.condition import AtomicCondition, Condition
from tinct.core.painted import Painted, strip_ansi
from tinct.core.style import RESET, Style

__all__ = [
    "RESET",
    "Application",
    "ApplicationKind",
    "AtomicCondition",
    "Attribute",
    "AttributeSet",
    "BitSet",
    "CachedBool",
    "Color",
    "ColorKind",
    "Condition",
    "Painted",
    "Quirk",
    "QuirkSet",
    "Style",
    "StyleBuilder",
    "Variant",
    "strip_ansi",
]
