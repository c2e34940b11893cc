# topmark:header:start
#
#   project      : SafePrintf
#   file         : cmd_common.py
#   file_relpath : src/safeprintf/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the SafePrintf CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from safeprintf.cli.errors import SafePrintfConfigError
from safeprintf.config.logging import get_logger
from safeprintf.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    import click

    from safeprintf.config.logging import SafePrintfLogger
    from safeprintf.config.model import Config
    from safeprintf.core.errors import ErrorPolicy

logger: SafePrintfLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command.

    This is the number of ``-v`` flags given to the group (0 when absent).
    """
    obj = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))


def build_config(
    *,
    config_paths: Iterable[Path] = (),
    no_config: bool = False,
    error_policy: ErrorPolicy | None = None,
    escapes: bool | None = None,
    newline: bool | None = None,
    coerce: bool | None = None,
) -> Config:
    """Merge discovered and explicit configuration files with CLI overrides.

    Args:
        config_paths (Iterable[Path]): Files given with ``--config``.
        no_config (bool): Skip discovery in the working directory.
        error_policy (ErrorPolicy | None): ``--on-error`` override.
        escapes (bool | None): ``--escapes/--no-escapes`` override.
        newline (bool | None): ``--newline/--no-newline`` override.
        coerce (bool | None): ``--coerce/--no-coerce`` override.

    Returns:
        Config: The frozen effective configuration.

    Raises:
        SafePrintfConfigError: If a configuration file holds an invalid value.
    """
    try:
        draft = MutableConfig.load_merged(extra_config_files=config_paths, no_config=no_config)
    except ValueError as exc:
        raise SafePrintfConfigError(str(exc)) from exc

    overrides = MutableConfig(
        error_policy=error_policy,
        escapes=escapes,
        newline=newline,
        coerce=coerce,
    )
    config = draft.merge_with(overrides).freeze()
    logger.debug("Effective configuration: %s", config)
    return config
