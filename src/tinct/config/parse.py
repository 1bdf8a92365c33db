# tinct:header:start
#
#   project      : Tinct
#   file         : parse.py
#   file_relpath : src/tinct/config/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Parse style definitions from plain data (TOML tables, CLI options).

A style table accepts the keys ``fg``, ``bg``, ``attributes`` and ``quirks``:

    ```toml
    [styles.banner]
    fg = "bright-white"
    bg = [70, 130, 180]
    attributes = ["bold", "underline"]
    quirks = ["wrap"]
    ```

Color tokens:
    - a color name: ``"red"``, ``"bright-blue"``, ``"primary"``;
    - an integer ``0..255``: an entry of the 256-color palette;
    - a list of three integers: a 24-bit color;
    - a ``"#rrggbb"`` hex string: a 24-bit color.

Names are case-insensitive; dashes and spaces are treated as underscores.
"""

from __future__ import annotations

import string
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

from tinct.core.attributes import Attribute, Quirk
from tinct.core.color import Color, ColorKind
from tinct.core.style import Style
from tinct.errors import StyleSpecError

if TYPE_CHECKING:
    from collections.abc import Mapping

_E = TypeVar("_E", bound=Enum)

KEY_FG: Final[str] = "fg"
KEY_BG: Final[str] = "bg"
KEY_ATTRIBUTES: Final[str] = "attributes"
KEY_QUIRKS: Final[str] = "quirks"

STYLE_KEYS: Final[frozenset[str]] = frozenset({KEY_FG, KEY_BG, KEY_ATTRIBUTES, KEY_QUIRKS})

# Kinds that need parameters cannot be selected by name.
_PARAMETRIC_KINDS: Final[frozenset[ColorKind]] = frozenset({ColorKind.FIXED, ColorKind.RGB})


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to an enum member name."""
    return s.strip().upper().replace("-", "_").replace(" ", "_")


def _member_by_name(enum_cls: type[_E], token: object, *, key: str) -> _E:
    if not isinstance(token, str):
        raise StyleSpecError(f"expected a name, got {token!r}", key=key)
    member: _E | None = enum_cls.__members__.get(_norm_token(token))
    if member is None:
        choices: str = ", ".join(name.lower() for name in enum_cls.__members__)
        raise StyleSpecError(f"unknown name {token!r} (expected one of: {choices})", key=key)
    return member


def _parse_hex(token: str, *, key: str) -> Color:
    digits: str = token[1:]
    # int(..., 16) alone would also accept signs, spaces and underscores.
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        raise StyleSpecError(f"expected '#rrggbb', got {token!r}", key=key)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return Color.from_rgb(r, g, b)


def parse_color(token: object, *, key: str = KEY_FG) -> Color:
    """Parse a color token.

    Args:
        token (object): A color name, palette index, ``[r, g, b]`` list or
            ``"#rrggbb"`` string.
        key (str): The key being parsed, reported in errors.

    Returns:
        Color: The parsed color.

    Raises:
        StyleSpecError: If `token` is not a valid color.
    """
    # bool is an int subclass; reject it explicitly.
    if isinstance(token, bool):
        raise StyleSpecError(f"expected a color, got {token!r}", key=key)

    if isinstance(token, int):
        try:
            return Color.from_fixed(token)
        except ValueError as exc:
            raise StyleSpecError(str(exc), key=key) from exc

    if isinstance(token, (list, tuple)):
        if len(token) != 3 or not all(
            isinstance(c, int) and not isinstance(c, bool) for c in token
        ):
            raise StyleSpecError(f"expected [r, g, b], got {token!r}", key=key)
        try:
            return Color.from_rgb(*token)
        except ValueError as exc:
            raise StyleSpecError(str(exc), key=key) from exc

    if isinstance(token, str):
        if token.startswith("#"):
            return _parse_hex(token, key=key)
        if token.strip().isdecimal():
            return parse_color(int(token), key=key)
        kind: ColorKind = _member_by_name(ColorKind, token, key=key)
        if kind in _PARAMETRIC_KINDS:
            raise StyleSpecError(f"{token!r} needs parameters", key=key)
        return Color(kind)

    raise StyleSpecError(f"expected a color, got {token!r}", key=key)


def parse_attribute(token: object) -> Attribute:
    """Parse an attribute name such as ``"bold"`` or ``"rapid-blink"``."""
    return _member_by_name(Attribute, token, key=KEY_ATTRIBUTES)


def parse_quirk(token: object) -> Quirk:
    """Parse a quirk name such as ``"wrap"`` or ``"on-bright"``."""
    return _member_by_name(Quirk, token, key=KEY_QUIRKS)


def _as_list(value: object, *, key: str) -> list[Any]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise StyleSpecError(f"expected a list of names, got {value!r}", key=key)
    return list(value)


def parse_style(table: Mapping[str, Any]) -> Style:
    """Build a `Style` from a style table.

    Args:
        table (Mapping[str, Any]): Keys ``fg``, ``bg``, ``attributes`` and
            ``quirks``; all optional.

    Returns:
        Style: The described style.

    Raises:
        StyleSpecError: On unknown keys or invalid values.
    """
    unknown: list[str] = sorted(set(table) - STYLE_KEYS)
    if unknown:
        raise StyleSpecError("unknown key", key=unknown[0])

    style = Style()
    if KEY_FG in table:
        style = style.fg(parse_color(table[KEY_FG], key=KEY_FG))
    if KEY_BG in table:
        style = style.bg(parse_color(table[KEY_BG], key=KEY_BG))
    for token in _as_list(table.get(KEY_ATTRIBUTES, []), key=KEY_ATTRIBUTES):
        style = style.attr(parse_attribute(token))
    for token in _as_list(table.get(KEY_QUIRKS, []), key=KEY_QUIRKS):
        style = style.quirk(parse_quirk(token))
    return style
