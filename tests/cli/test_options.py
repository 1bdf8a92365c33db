# tinct:header:start
#
#   project      : Tinct
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Group options: color resolution, verbosity and their exit codes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize
from tinct.cli.errors import TinctConfigError, TinctUsageError
from tinct.cli.exit_codes import ExitCode
from tinct.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from tinct.config.logging import LOG_LEVEL_ENV, TRACE_LEVEL, ChalkFormatter
from tinct.core.condition import yes_color_live

if TYPE_CHECKING:
    from click.testing import Result


# --- resolve_color_mode -------------------------------------------------------


@parametrize(
    "mode, env, isatty, expected",
    [
        (ColorMode.ALWAYS, {"NO_COLOR": "1"}, False, True),
        (ColorMode.NEVER, {"FORCE_COLOR": "1"}, True, False),
        (None, {"FORCE_COLOR": "1", "NO_COLOR": "1"}, False, True),
        (ColorMode.AUTO, {"FORCE_COLOR": "0"}, False, False),
        (None, {"NO_COLOR": ""}, True, False),
        (None, {"NO_COLOR": "0"}, True, True),
        (None, {"NO_COLOR": "0"}, False, False),
        (None, {}, True, True),
        (ColorMode.AUTO, {}, False, False),
    ],
)
def test_resolve_color_mode_precedence(
    monkeypatch: pytest.MonkeyPatch,
    mode: ColorMode | None,
    env: dict[str, str],
    isatty: bool,
    expected: bool,
) -> None:
    """CLI flag, then FORCE_COLOR, then NO_COLOR, then the TTY decide."""
    for name, value in env.items():
        monkeypatch.setenv(name, value)

    assert resolve_color_mode(color_mode_override=mode, stdout_isatty=isatty) is expected


@parametrize("value", ["", "0", "1", "false"])
def test_no_color_matches_the_yes_color_detector(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    """The CLI and `Condition.YES_COLOR` read NO_COLOR the same way."""
    monkeypatch.setenv("NO_COLOR", value)

    cli_color: bool = resolve_color_mode(color_mode_override=None, stdout_isatty=True)
    assert cli_color is yes_color_live()


# --- resolve_verbosity --------------------------------------------------------


@parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """Each -v lowers the level; -q only shows errors."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_rejects_both() -> None:
    """-v and -q are mutually exclusive."""
    with pytest.raises(TinctUsageError):
        resolve_verbosity(1, 1)


def test_error_exit_codes() -> None:
    """CLI errors carry the documented exit codes."""
    assert TinctUsageError("x").exit_code == ExitCode.USAGE_ERROR == 64
    assert TinctConfigError("x").exit_code == ExitCode.CONFIG_ERROR == 78


# --- Through the CLI ----------------------------------------------------------


@mark_cli
def test_verbose_and_quiet_together_is_a_usage_error() -> None:
    """Passing -v and -q exits with USAGE_ERROR."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)

    assert "mutually exclusive" in result.output


@mark_cli
def test_force_color_env_enables_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR turns styling on when no flag is given."""
    monkeypatch.setenv("FORCE_COLOR", "1")

    result: Result = run_cli(["paint", "--fg", "red", "hi"])

    assert_SUCCESS(result)

    assert result.output == "\x1b[31mhi\x1b[0m\n"


@mark_cli
def test_no_color_flag_beats_force_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """--no-color wins over the environment."""
    monkeypatch.setenv("FORCE_COLOR", "1")

    result: Result = run_cli(["--no-color", "paint", "--fg", "red", "hi"])

    assert_SUCCESS(result)

    assert result.output == "hi\n"


@mark_cli
def test_no_color_env_disables_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """NO_COLOR turns styling off in auto mode."""
    monkeypatch.setenv("NO_COLOR", "1")

    result: Result = run_cli(["--color", "auto", "paint", "--fg", "red", "hi"])

    assert_SUCCESS(result)

    assert result.output == "hi\n"


@mark_cli
def test_non_tty_output_is_plain() -> None:
    """In auto mode, output captured by the runner is not a TTY."""
    result: Result = run_cli(["paint", "--fg", "red", "hi"])

    assert_SUCCESS(result)

    assert result.output == "hi\n"


@mark_cli
def test_log_level_env_overrides_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    """TINCT_LOG_LEVEL wins over -q."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")

    result: Result = run_cli(["-q", "version"])

    assert_SUCCESS(result)

    assert logging.getLogger().level == logging.DEBUG


@mark_cli
@parametrize("color_args, colored", [(["--color", "always"], True), (["--no-color"], False)])
def test_log_records_follow_the_color_decision(color_args: list[str], colored: bool) -> None:
    """The stderr log formatter is colored only when ANSI output is on."""
    result: Result = run_cli([*color_args, "version"])

    assert_SUCCESS(result)

    formatter = logging.getLogger().handlers[0].formatter
    assert isinstance(formatter, ChalkFormatter)
    assert formatter.color is colored
