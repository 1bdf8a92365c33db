# tinct:header:start
#
#   project      : Tinct
#   file         : errors.py
#   file_relpath : src/tinct/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Exceptions for the Tinct CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tinct.cli.exit_codes import ExitCode


class TinctCliError(click.ClickException):
    """Base class for all Tinct CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class TinctUsageError(TinctCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TinctConfigError(TinctCliError):
    """Error for configuration errors (unreadable or invalid style files)."""

    exit_code = ExitCode.CONFIG_ERROR
