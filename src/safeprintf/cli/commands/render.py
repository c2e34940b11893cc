# topmark:header:start
#
#   project      : SafePrintf
#   file         : render.py
#   file_relpath : src/safeprintf/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SafePrintf `render` command.

Renders a format string with the given arguments to standard output, in the manner of
the POSIX ``printf`` utility:

    safeprintf render '%-8s|%05.1f\\n' total 3.14159

Exit codes:
    0: success.
    1: an argument could not be converted to the number its conversion expects
       (a warning is printed and zero is used instead).
    64: usage error (e.g. an unterminated escape sequence in FORMAT).
    65: the format string is malformed, has too few arguments, or uses an
        unsupported feature.
    78: invalid configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from safeprintf.cli.cmd_common import build_config
from safeprintf.cli.coerce import coerce_arguments, unescape
from safeprintf.cli.errors import SafePrintfFormatError, SafePrintfUsageError
from safeprintf.cli.exit_codes import ExitCode
from safeprintf.cli.options import common_config_options, render_options
from safeprintf.config.logging import get_logger
from safeprintf.core.errors import FormatError
from safeprintf.format.sequencer import format_to

if TYPE_CHECKING:
    from pathlib import Path

    from safeprintf.cli.console_api import ConsoleLike
    from safeprintf.config.logging import SafePrintfLogger
    from safeprintf.core.errors import ErrorPolicy

logger: SafePrintfLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render FORMAT with ARGS to standard output.",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("format_string", metavar="FORMAT")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@common_config_options
@render_options
def render_command(
    *,
    format_string: str,
    args: tuple[str, ...],
    config_paths: tuple[Path, ...],
    no_config: bool,
    error_policy: ErrorPolicy | None,
    escapes: bool | None,
    newline: bool | None,
    coerce: bool | None,
) -> None:
    """Render FORMAT with ARGS to standard output.

    Args:
        format_string (str): The format string.
        args (tuple[str, ...]): The arguments, converted per conversion letter unless
            ``--no-coerce`` is given.
        config_paths (tuple[Path, ...]): Extra configuration files.
        no_config (bool): Skip configuration discovery.
        error_policy (ErrorPolicy | None): Error policy override.
        escapes (bool | None): Escape processing override.
        newline (bool | None): Trailing newline override.
        coerce (bool | None): Argument coercion override.

    Raises:
        SafePrintfUsageError: If FORMAT holds an invalid escape sequence.
        SafePrintfFormatError: If FORMAT violates the format contract under the
            ``raise`` error policy.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config = build_config(
        config_paths=config_paths,
        no_config=no_config,
        error_policy=error_policy,
        escapes=escapes,
        newline=newline,
        coerce=coerce,
    )

    fmt = format_string
    if config.escapes:
        try:
            fmt = unescape(format_string)
        except UnicodeDecodeError as exc:
            raise SafePrintfUsageError(f"Invalid escape sequence in FORMAT: {exc.reason}") from exc

    values: list[object] = list(args)
    failed = False
    if config.coerce:
        coerced = coerce_arguments(fmt, args)
        values = coerced.values
        for problem in coerced.problems:
            console.warn(f"Warning: {problem}")
        failed = bool(coerced.problems)

    try:
        format_to(console, fmt, *values, on_error=config.error_handler)
    except FormatError as exc:
        raise SafePrintfFormatError(str(exc)) from exc
    finally:
        if config.newline:
            console.print()

    if failed:
        ctx.exit(ExitCode.FAILURE)
