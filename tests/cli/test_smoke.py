# tinct:header:start
#
#   project      : Tinct
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""CLI smoke tests for Tinct.

Provides minimal coverage that the CLI entry point is callable and that
`--help`, `version` and `demo` succeed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli
from tinct.constants import TINCT_VERSION

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_cli_entry() -> None:
    """It should show usage information and exit code SUCCESS when `--help` is passed."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)

    assert "Usage" in result.output
    for command in ("demo", "paint", "strip", "styles", "version"):
        assert command in result.output


@mark_cli
def test_no_command_prints_hint_and_help() -> None:
    """Without a subcommand the group prints a hint followed by the help text."""
    result: Result = run_cli([])

    assert_SUCCESS(result)

    assert result.output.startswith("Hint: use 'tinct demo'")
    assert "Usage" in result.output


@mark_cli
def test_version() -> None:
    """It should print the installed version and exit code SUCCESS."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)

    assert result.output == f"{TINCT_VERSION}\n"


@mark_cli
def test_version_is_bold_with_color() -> None:
    """With color forced on, the version is printed in bold."""
    result: Result = run_cli(["--color", "always", "version"])

    assert_SUCCESS(result)

    assert result.output == f"\x1b[1m{TINCT_VERSION}\x1b[0m\n"


@mark_cli
def test_demo_plain() -> None:
    """Without color the demo prints plain text only."""
    result: Result = run_cli(["--no-color", "demo"])

    assert_SUCCESS(result)

    assert "\x1b" not in result.output
    assert "xyz this is x, now y, finally z" in result.output
    assert "Testing, 1, 2, !" in result.output
    assert "Hey! Stop and Go" in result.output


@mark_cli
def test_demo_colored() -> None:
    """With color the demo shows SGR sequences, wrapping and a hyperlink."""
    result: Result = run_cli(["--color", "always", "demo"])

    assert_SUCCESS(result)

    assert "\x1b[31mStop\x1b[0m\x1b[34m and " in result.output
    assert "\x1b]8;;https://example.com\x1b\\" in result.output
    assert "Testing, 1, 2, 3!" not in result.output
