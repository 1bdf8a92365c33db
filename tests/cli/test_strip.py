# tinct:header:start
#
#   project      : Tinct
#   file         : test_strip.py
#   file_relpath : tests/cli/test_strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""CLI `strip` command: arguments and STDIN."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_strip_arguments() -> None:
    """Arguments are joined with spaces and cleaned."""
    result: Result = run_cli(["strip", "\x1b[31mred\x1b[0m", "\x1b[1mbold\x1b[0m"])

    assert_SUCCESS(result)

    assert result.output == "red bold\n"


@mark_cli
def test_strip_stdin() -> None:
    """Without arguments, STDIN is cleaned line by line."""
    text = "\x1b[31merror\x1b[0m: boom\nplain line\n\x1b[4;35munderlined\x1b[0m"
    result: Result = run_cli(["--color", "always", "strip"], input_text=text)

    assert_SUCCESS(result)

    assert result.output == "error: boom\nplain line\nunderlined"


@mark_cli
def test_strip_empty_stdin() -> None:
    """Empty STDIN produces no output."""
    result: Result = run_cli(["strip"], input_text="")

    assert_SUCCESS(result)

    assert result.output == ""
