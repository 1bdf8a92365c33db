# tinct:header:start
#
#   project      : Tinct
#   file         : main.py
#   file_relpath : src/tinct/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# tinct:header:end

"""Tinct command line entry point.

Key ideas:
- Group-level options (verbosity, color, extra style files) are initialized once
  and placed into ``ctx.obj``.
- The resolved color decision drives the library's global switch, so every
  subcommand renders through the same `tinct.enable()` / `tinct.disable()` state.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tinct.cli.commands.demo import demo_command
from tinct.cli.commands.paint import paint_command
from tinct.cli.commands.strip import strip_command
from tinct.cli.commands.styles import styles_command
from tinct.cli.commands.version import version_command
from tinct.cli.console import TinctConsole
from tinct.cli.errors import TinctConfigError
from tinct.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tinct.config.loaders import register_styles_file
from tinct.config.logging import get_logger, resolve_env_log_level, setup_logging
from tinct.core import enablement
from tinct.errors import StyleConfigError

if TYPE_CHECKING:
    from tinct.config.logging import TinctLogger

logger: TinctLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
) -> None:
    """Initialize shared state (logging, color, styles) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_files (tuple[Path, ...]): Extra style files to register.

    Raises:
        TinctConfigError: If a style file is unreadable or invalid.
    """
    ctx.obj = ctx.obj or {}

    # TINCT_LOG_LEVEL wins over -v/-q.
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level

    effective_mode: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    enable_color: bool = resolve_color_mode(color_mode_override=effective_mode)
    setup_logging(level=log_level, color=enable_color)
    if enable_color:
        enablement.enable()
    else:
        enablement.disable()
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    logger.debug("color output %s", "enabled" if enable_color else "disabled")

    ctx.obj["console"] = TinctConsole(enable_color=enable_color)

    for path in config_files:
        try:
            names: list[str] = register_styles_file(path)
        except StyleConfigError as exc:
            raise TinctConfigError(str(exc)) from exc
        logger.info("registered %d style(s) from %s", len(names), path)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Tinct: style terminal text with ANSI colors and attributes.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_files",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    multiple=True,
    help="Register the styles defined in a TOML file. Repeatable.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_files: tuple[Path, ...],
) -> None:
    """Entry point for the Tinct CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
        config_files=config_files,
    )
    console: TinctConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tinct demo' to see what your terminal supports.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(demo_command)

cli.add_command(paint_command)

cli.add_command(strip_command)

cli.add_command(styles_command)

if __name__ == "__main__":
    cli()
