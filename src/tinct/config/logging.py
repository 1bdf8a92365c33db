# tinct:header:start
#
#   project      : Tinct
#   file         : logging.py
#   file_relpath : src/tinct/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Custom Tinct logging with TRACE logging.

This module extends the standard logging module with Tinct-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.

The library itself never installs handlers; only the `tinct` command line calls
`setup_logging()`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "TINCT_LOG_LEVEL"


class TinctLogger(logging.Logger):
    """Custom logger class for Tinct with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(TinctLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Highest threshold first; records below TRACE use the fallback painter.
_LEVEL_PAINTERS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity, or leaves it plain.

    The `tinct` command line passes its own color decision (``--color``,
    ``FORCE_COLOR``, ``NO_COLOR``, TTY) as `color`, so diagnostics on stderr
    follow the same switch as the styled text on stdout.

    Attributes:
        color (bool): Whether records are colorized.
    """

    def __init__(self, fmt: str | None = None, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record, colored by its level when enabled.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The formatted log message.
        """
        message: str = super().format(record)
        if not self.color:
            return message
        for threshold, painter in _LEVEL_PAINTERS:
            if record.levelno >= threshold:
                return painter(message)
        return chalk.dim.red(message)


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors TINCT_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    Unrecognized values are ignored.
    """
    val: str | None = os.environ.get(LOG_LEVEL_ENV)
    if not val:
        return None
    v: str = val.strip().upper()
    if v.isdecimal():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def setup_logging(level: int | None = None, *, color: bool = True) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][tinct.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.

    Records go to stderr so they never mix with styled text written to stdout.

    Args:
        level (int | None): Root log level; None consults the environment.
        color (bool): Colorize records by level; pass False when ANSI output
            is turned off.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(
        LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> TinctLogger:
    """Retrieve a TinctLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        TinctLogger: A TinctLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("TinctLogger", logger)
