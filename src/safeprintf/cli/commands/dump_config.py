# topmark:header:start
#
#   project      : SafePrintf
#   file         : dump_config.py
#   file_relpath : src/safeprintf/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SafePrintf `dump-config` command.

Emits the effective SafePrintf configuration as TOML after applying defaults, the
configuration files found in the working directory or passed with ``--config``, and any
CLI overrides. The output is wrapped between ``# === BEGIN ===`` and ``# === END ===``
markers for easy parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from safeprintf.cli.cmd_common import build_config
from safeprintf.cli.options import common_config_options, render_options

if TYPE_CHECKING:
    from pathlib import Path

    from safeprintf.cli.console_api import ConsoleLike
    from safeprintf.core.errors import ErrorPolicy


@click.command(
    name="dump-config",
    help="Dump the final merged SafePrintf configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Nest the settings under [tool.safeprintf], ready for pyproject.toml.",
)
@common_config_options
@render_options
def dump_config_command(
    *,
    for_pyproject: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
    error_policy: ErrorPolicy | None,
    escapes: bool | None,
    newline: bool | None,
    coerce: bool | None,
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        for_pyproject (bool): Nest the output under ``[tool.safeprintf]``.
        config_paths (tuple[Path, ...]): Extra configuration files.
        no_config (bool): Skip configuration discovery.
        error_policy (ErrorPolicy | None): Error policy override.
        escapes (bool | None): Escape processing override.
        newline (bool | None): Trailing newline override.
        coerce (bool | None): Argument coercion override.
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

    console.print("# === BEGIN ===")
    for path in config.config_files:
        console.print(f"# source: {path}")
    console.print(config.to_toml(for_pyproject=for_pyproject), nl=False)
    console.print("# === END ===")
