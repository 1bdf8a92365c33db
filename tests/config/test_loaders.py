# tinct:header:start
#
#   project      : Tinct
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tests for loading named styles from TOML files.

Covers both layouts (``[styles.*]`` in a standalone file and
``[tool.tinct.styles.*]`` in ``pyproject.toml``) and the error paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tinct.config.loaders import load_styles_file, load_toml_dict, register_styles_file
from tinct.core.attributes import Quirk
from tinct.core.style import Style
from tinct.errors import DuplicateStyleError, StyleConfigError
from tinct.registry import StyleRegistry

if TYPE_CHECKING:
    from pathlib import Path

STANDALONE = """\
# project styles
[styles.banner]
fg = "bright-white"
bg = "#4682b4"
attributes = ["bold"]

[styles.quiet]
fg = 244
quirks = ["mask"]
"""

PYPROJECT = """\
[project]
name = "demo"

[tool.tinct.styles.error]
fg = "magenta"
attributes = ["bold", "underline"]
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_standalone_file(tmp_path: Path) -> None:
    styles = load_styles_file(_write(tmp_path / "tinct.toml", STANDALONE))
    assert list(styles) == ["banner", "quiet"]
    assert styles["banner"] == Style().bright_white().on_rgb(70, 130, 180).bold()
    assert styles["quiet"] == Style().fixed(244)
    assert styles["quiet"].has_quirk(Quirk.MASK)


def test_load_pyproject_layout(tmp_path: Path) -> None:
    styles = load_styles_file(_write(tmp_path / "pyproject.toml", PYPROJECT))
    assert styles == {"error": Style().magenta().bold().underline()}


def test_pyproject_without_section_has_no_styles(tmp_path: Path) -> None:
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    assert load_styles_file(path) == {}


def test_pyproject_layout_is_only_used_for_pyproject(tmp_path: Path) -> None:
    # A standalone file with a [tool.tinct] table defines nothing.
    assert load_styles_file(_write(tmp_path / "other.toml", PYPROJECT)) == {}


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(StyleConfigError, match="cannot read"):
        load_toml_dict(tmp_path / "missing.toml")


def test_invalid_toml(tmp_path: Path) -> None:
    path = _write(tmp_path / "tinct.toml", "[styles\nfg = ")
    with pytest.raises(StyleConfigError, match="invalid TOML"):
        load_styles_file(path)


def test_styles_must_be_a_table(tmp_path: Path) -> None:
    path = _write(tmp_path / "tinct.toml", 'styles = "red"\n')
    with pytest.raises(StyleConfigError, match="must be a table"):
        load_styles_file(path)


def test_style_entry_must_be_a_table(tmp_path: Path) -> None:
    path = _write(tmp_path / "tinct.toml", '[styles]\nbanner = "red"\n')
    with pytest.raises(StyleConfigError, match="'banner' must be a table"):
        load_styles_file(path)


def test_invalid_style_names_the_style_and_key(tmp_path: Path) -> None:
    path = _write(tmp_path / "tinct.toml", '[styles.banner]\nfg = "purple"\n')
    with pytest.raises(StyleConfigError) as exc_info:
        load_styles_file(path)
    message = str(exc_info.value)
    assert "'banner'" in message
    assert "fg: " in message


def test_register_styles_file_overrides_builtins(tmp_path: Path) -> None:
    names = register_styles_file(_write(tmp_path / "pyproject.toml", PYPROJECT))
    assert names == ["error"]
    assert StyleRegistry.require("error") == Style().magenta().bold().underline()


def test_register_styles_file_without_replace(tmp_path: Path) -> None:
    path = _write(tmp_path / "pyproject.toml", PYPROJECT)
    with pytest.raises(DuplicateStyleError):
        register_styles_file(path, replace=False)


def test_signed_hex_color_is_a_config_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "tinct.toml", '[styles.banner]\nfg = "#-10000"\n')
    with pytest.raises(StyleConfigError, match="fg: expected '#rrggbb'"):
        load_styles_file(path)
