# topmark:header:start
#
#   project      : SafePrintf
#   file         : main.py
#   file_relpath : src/safeprintf/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SafePrintf command line interface.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Program output goes through a `ClickConsole`; diagnostics go through `logging`
  (on stderr), so rendered text on stdout is never interleaved with log records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from safeprintf.cli.commands.dump_config import dump_config_command
from safeprintf.cli.commands.inspect import inspect_command
from safeprintf.cli.commands.render import render_command
from safeprintf.cli.commands.version import version_command
from safeprintf.cli.console import ClickConsole
from safeprintf.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from safeprintf.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from safeprintf.cli.console_api import ConsoleLike
    from safeprintf.config.logging import SafePrintfLogger

logger: SafePrintfLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # -v/-q set the log level unless SAFEPRINTF_LOG_LEVEL overrides it
    level_cli = resolve_verbosity(verbose, quiet)
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else level_cli
    ctx.obj["verbosity_level"] = verbose
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    if "console" not in ctx.obj:
        ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,  # Always invoke the cli() function
    help="SafePrintf: type-safe printf-style formatting.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the SafePrintf CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'safeprintf render FORMAT [ARGS...]' to render a format string.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(inspect_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
