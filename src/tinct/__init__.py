# tinct:header:start
#
#   project      : Tinct
#   file         : __init__.py
#   file_relpath : src/tinct/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct package.

Tinct styles terminal text with ANSI SGR sequences. Build a `Style` with
chained builder calls, wrap a value with `paint()`, and format it:

    ```python
    import tinct
    from tinct import Color, paint

    print(f"{paint('ready').green().bold()} {paint(42).on_fixed(236)}")

    tinct.disable()  # every painted value now renders plain
    ```

Global enablement defaults to `Condition.DEFAULT` (on whenever the terminal
supports ANSI sequences) and can be changed from any thread.
"""

from __future__ import annotations

from tinct.core import (
    RESET,
    Application,
    AtomicCondition,
    Attribute,
    AttributeSet,
    Color,
    Condition,
    Painted,
    Quirk,
    QuirkSet,
    Style,
    StyleBuilder,
    Variant,
    strip_ansi,
)
from tinct.core.enablement import (
    condition,
    disable,
    enable,
    is_enabled,
    set_condition,
    whenever,
)
from tinct.hyperlink import PaintedLink, link
from tinct.shortcuts import (
    black,
    blink,
    blue,
    bold,
    bright,
    bright_black,
    bright_blue,
    bright_cyan,
    bright_green,
    bright_magenta,
    bright_red,
    bright_white,
    bright_yellow,
    conceal,
    cyan,
    dim,
    fixed,
    green,
    invert,
    italic,
    linger,
    magenta,
    mask,
    on_bright,
    paint,
    primary,
    rapid_blink,
    red,
    resetting,
    rgb,
    strike,
    underline,
    white,
    wrap,
    yellow,
)

__all__ = [
    "RESET",
    "Application",
    "AtomicCondition",
    "Attribute",
    "AttributeSet",
    "Color",
    "Condition",
    "Painted",
    "PaintedLink",
    "Quirk",
    "QuirkSet",
    "Style",
    "StyleBuilder",
    "Variant",
    "black",
    "blink",
    "blue",
    "bold",
    "bright",
    "bright_black",
    "bright_blue",
    "bright_cyan",
    "bright_green",
    "bright_magenta",
    "bright_red",
    "bright_white",
    "bright_yellow",
    "conceal",
    "condition",
    "cyan",
    "dim",
    "disable",
    "enable",
    "fixed",
    "green",
    "invert",
    "is_enabled",
    "italic",
    "linger",
    "link",
    "magenta",
    "mask",
    "on_bright",
    "paint",
    "primary",
    "rapid_blink",
    "red",
    "resetting",
    "rgb",
    "set_condition",
    "strike",
    "strip_ansi",
    "underline",
    "whenever",
    "white",
    "wrap",
    "yellow",
]
