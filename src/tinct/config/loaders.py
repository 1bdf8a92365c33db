# tinct:header:start
#
#   project      : Tinct
#   file         : loaders.py
#   file_relpath : src/tinct/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Load named style definitions from TOML files.

Two layouts are recognized:
- ``tinct.toml`` (or any other file name): top-level ``[styles.<name>]`` tables;
- ``pyproject.toml``: ``[tool.tinct.styles.<name>]`` tables.

Parsing is done with `tomlkit`; each table is handed to
[`parse_style`][tinct.config.parse.parse_style].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tinct.config.logging import get_logger
from tinct.config.parse import parse_style
from tinct.errors import StyleConfigError, StyleSpecError
from tinct.registry.styles import StyleRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from tinct.config.logging import TinctLogger
    from tinct.core.style import Style

logger: TinctLogger = get_logger(__name__)

PYPROJECT_TOML: Final[str] = "pyproject.toml"
SECTION_STYLES: Final[str] = "styles"


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        dict[str, Any]: The parsed TOML content as plain Python values.

    Raises:
        StyleConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise StyleConfigError(f"cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        raise StyleConfigError(f"invalid TOML in {path}: {e}") from e
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def _styles_section(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Return the styles table for the layout implied by `path`'s name."""
    section: Any
    if path.name == PYPROJECT_TOML:
        section = data.get("tool", {}).get("tinct", {}).get(SECTION_STYLES, {})
    else:
        section = data.get(SECTION_STYLES, {})
    if not isinstance(section, dict):
        raise StyleConfigError(f"{path}: [{SECTION_STYLES}] must be a table")
    return section


def load_styles_file(path: Path) -> dict[str, Style]:
    """Read the named styles defined in `path`.

    Args:
        path (Path): A ``tinct.toml``-style file or a ``pyproject.toml``.

    Returns:
        dict[str, Style]: Styles keyed by name, in file order.

    Raises:
        StyleConfigError: If the file is unreadable or a style is invalid.
    """
    data: dict[str, Any] = load_toml_dict(path)
    styles: dict[str, Style] = {}
    for name, table in _styles_section(data, path).items():
        if not isinstance(table, dict):
            raise StyleConfigError(f"{path}: style {name!r} must be a table")
        try:
            styles[name] = parse_style(table)
        except StyleSpecError as e:
            raise StyleConfigError(f"{path}: style {name!r}: {e}") from e
    logger.debug("loaded %d style(s) from %s", len(styles), path)
    return styles


def register_styles_file(path: Path, *, replace: bool = True) -> list[str]:
    """Load `path` and register every style it defines.

    Args:
        path (Path): The configuration file.
        replace (bool): Override styles that are already registered.

    Returns:
        list[str]: The registered names, in file order.
    """
    styles: dict[str, Style] = load_styles_file(path)
    for name, style in styles.items():
        StyleRegistry.register(name, style, replace=replace)
    return list(styles)
