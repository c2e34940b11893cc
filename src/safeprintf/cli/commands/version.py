# topmark:header:start
#
#   project      : SafePrintf
#   file         : version.py
#   file_relpath : src/safeprintf/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SafePrintf `version` command.

Prints the current SafePrintf version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from safeprintf.cli.cli_types import EnumChoiceParam, OutputFormat
from safeprintf.cli.cmd_common import get_effective_verbosity
from safeprintf.constants import SAFEPRINTF_VERSION

if TYPE_CHECKING:
    from safeprintf.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SafePrintf.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SafePrintf.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    vlevel = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": SAFEPRINTF_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# SafePrintf Version\n")
        console.print(f"**SafePrintf version: {SAFEPRINTF_VERSION}**")
    else:
        if vlevel > 0:
            console.print(console.styled("SafePrintf version:\n", bold=True, underline=True))
            console.print(f"    {console.styled(SAFEPRINTF_VERSION, bold=True)}")
        else:
            console.print(console.styled(SAFEPRINTF_VERSION, bold=True))
