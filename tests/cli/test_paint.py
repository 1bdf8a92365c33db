# tinct:header:start
#
#   project      : Tinct
#   file         : test_paint.py
#   file_relpath : tests/cli/test_paint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""CLI `paint` command: option parsing, named styles and hyperlinks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
@parametrize(
    "args, expected",
    [
        (["--fg", "red", "hi"], "\x1b[31mhi\x1b[0m"),
        (["--fg", "yellow", "--attr", "bold", "hi"], "\x1b[1;33mhi\x1b[0m"),
        (["--fg", "bright-blue", "hi"], "\x1b[94mhi\x1b[0m"),
        (["--fg", "100", "--bg", "magenta", "hi"], "\x1b[45;38;5;100mhi\x1b[0m"),
        (["--fg", "#4682b4", "hi"], "\x1b[38;2;70;130;180mhi\x1b[0m"),
        (["--attr", "underline", "--attr", "bold", "hi"], "\x1b[1;4mhi\x1b[0m"),
        (["--fg", "red", "--quirk", "bright", "hi"], "\x1b[91mhi\x1b[0m"),
        (["--fg", "red", "--quirk", "linger", "hi"], "\x1b[31mhi"),
        (["hello", "world"], "hello world"),
    ],
)
def test_paint_with_color(args: list[str], expected: str) -> None:
    """Each option combination renders the expected SGR sequence."""
    result: Result = run_cli(["--color", "always", "paint", *args])

    assert_SUCCESS(result)

    assert result.output == expected + "\n"


@mark_cli
def test_paint_without_color() -> None:
    """Styling is dropped when color is disabled."""
    result: Result = run_cli(["--no-color", "paint", "--fg", "red", "--attr", "bold", "hi"])

    assert_SUCCESS(result)

    assert result.output == "hi\n"


@mark_cli
def test_paint_masked_without_color() -> None:
    """Masked text disappears when color is disabled."""
    result: Result = run_cli(["--color", "never", "paint", "--quirk", "mask", "secret"])

    assert_SUCCESS(result)

    assert result.output == "\n"


@mark_cli
def test_paint_no_newline() -> None:
    """`-n` suppresses the trailing newline."""
    result: Result = run_cli(["--no-color", "paint", "-n", "hi"])

    assert_SUCCESS(result)

    assert result.output == "hi"


@mark_cli
def test_paint_named_style_with_overrides() -> None:
    """Explicit options apply on top of `--style`."""
    result: Result = run_cli(["--color", "always", "paint", "--style", "error", "--fg", "blue", "x"])

    assert_SUCCESS(result)

    assert result.output == "\x1b[1;34mx\x1b[0m\n"


@mark_cli
def test_paint_unknown_style_is_a_usage_error() -> None:
    """An unknown `--style` name exits with USAGE_ERROR."""
    result: Result = run_cli(["paint", "--style", "nope", "x"])

    assert_USAGE_ERROR(result)

    assert "unknown style: 'nope'" in result.output


@mark_cli
def test_paint_invalid_color_is_rejected() -> None:
    """Invalid color tokens are reported by Click with the offending key."""
    result: Result = run_cli(["paint", "--bg", "purple", "x"])

    assert result.exit_code != 0
    assert "bg: unknown name 'purple'" in result.output


@mark_cli
def test_paint_signed_hex_color_is_a_usage_error() -> None:
    """A signed hex token is rejected by Click instead of crashing the command."""
    result: Result = run_cli(["paint", "--fg", "#-1-1-1", "x"])

    assert result.exit_code == 2, result.output
    assert isinstance(result.exception, SystemExit)
    assert "fg: expected '#rrggbb'" in result.output


@mark_cli
def test_paint_requires_text() -> None:
    """TEXT is mandatory."""
    result: Result = run_cli(["paint"])

    assert result.exit_code != 0
    assert "Missing argument" in result.output


@mark_cli
def test_paint_link() -> None:
    """`--link` wraps the styled text in an OSC 8 hyperlink."""
    result: Result = run_cli(
        ["--color", "always", "paint", "--fg", "green", "--link", "https://example.com", "docs"]
    )

    assert_SUCCESS(result)

    assert result.output == (
        "\x1b]8;;https://example.com\x1b\\\x1b[32mdocs\x1b[0m\x1b]8;;\x1b\\\n"
    )


@mark_cli
def test_paint_link_without_color_is_plain() -> None:
    """Hyperlink markup is dropped together with the styling."""
    result: Result = run_cli(["--no-color", "paint", "--link", "https://example.com", "docs"])

    assert_SUCCESS(result)

    assert result.output == "docs\n"
