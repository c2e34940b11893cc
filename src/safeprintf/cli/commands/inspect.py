# topmark:header:start
#
#   project      : SafePrintf
#   file         : inspect.py
#   file_relpath : src/safeprintf/cli/commands/inspect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SafePrintf `inspect` command.

Explains a format string: lists its literal runs and conversion specs, and for each
spec the sink configuration and extra behaviors it maps to. Nothing is rendered and no
arguments are needed.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from safeprintf.cli.cli_types import EnumChoiceParam, OutputFormat
from safeprintf.cli.cmd_common import build_config, get_effective_verbosity
from safeprintf.cli.coerce import unescape
from safeprintf.cli.errors import SafePrintfFormatError, SafePrintfUsageError
from safeprintf.cli.options import common_config_options
from safeprintf.core.errors import FormatError
from safeprintf.format.sequencer import Literal, iter_segments
from safeprintf.format.state import ExtraFlags, map_spec

if TYPE_CHECKING:
    from pathlib import Path

    from safeprintf.cli.console_api import ConsoleLike
    from safeprintf.format.sequencer import Segment


def extra_flag_names(extra: ExtraFlags) -> list[str]:
    """Return the names of the flags set in ``extra``, in declaration order."""
    return [flag.name for flag in ExtraFlags if flag.name and flag.value and flag in extra]


def segment_to_dict(segment: Segment) -> dict[str, Any]:
    """Return a JSON-friendly description of one segment.

    Literal runs map to ``{"kind": "literal", "text": ...}``; conversion specs carry
    their parsed fields plus the mapped sink configuration and extra flags.
    """
    if isinstance(segment, Literal):
        return {"kind": "literal", "text": segment.text}
    config, extra = map_spec(segment)
    return {
        "kind": "spec",
        **segment.to_dict(),
        "config": config.to_dict(),
        "extra": extra_flag_names(extra),
    }


def _describe(value: object) -> str:
    return "-" if value is None else str(value)


def _render_text(console: ConsoleLike, items: list[dict[str, Any]], verbosity: int) -> None:
    for item in items:
        if item["kind"] == "literal":
            console.print(f"{console.styled('literal', fg='cyan')}  {item['text']!r}")
            continue
        flags = "".join(item["flags"]) or "-"
        console.print(
            f"{console.styled('spec', fg='green', bold=True)}     {item['text']!r}"
            f"  conversion={item['conversion']}"
            f" flags={flags!r}"
            f" width={_describe(item['width'])}"
            f" precision={_describe(item['precision'])}"
        )
        if item["extra"]:
            console.print(f"         extra: {', '.join(item['extra'])}")
        if verbosity > 0:
            settings = ", ".join(f"{key}={value!r}" for key, value in item["config"].items())
            console.print(f"         config: {settings}")


def _render_markdown(console: ConsoleLike, fmt: str, items: list[dict[str, Any]]) -> None:
    console.print("# Format string\n")
    console.print(f"`{fmt}`\n")
    console.print("| # | Kind | Text | Conversion | Flags | Width | Precision | Extra |")
    console.print("|---|------|------|------------|-------|-------|-----------|-------|")
    for index, item in enumerate(items, start=1):
        text = item["text"].replace("|", "\\|")
        if item["kind"] == "literal":
            console.print(f"| {index} | literal | `{text}` | | | | | |")
            continue
        console.print(
            f"| {index} | spec | `{text}` | `{item['conversion']}`"
            f" | {' '.join(f'`{flag}`' for flag in item['flags'])}"
            f" | {_describe(item['width'])}"
            f" | {_describe(item['precision'])}"
            f" | {', '.join(item['extra'])} |"
        )


@click.command(
    name="inspect",
    help="Explain FORMAT: list its literal runs and conversion specs.",
)
@click.argument("format_string", metavar="FORMAT")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@common_config_options
def inspect_command(
    *,
    format_string: str,
    output_format: OutputFormat | None,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Explain FORMAT without rendering it.

    Args:
        format_string (str): The format string.
        output_format (OutputFormat | None): Output format (text by default).
        config_paths (tuple[Path, ...]): Extra configuration files.
        no_config (bool): Skip configuration discovery.

    Raises:
        SafePrintfUsageError: If FORMAT holds an invalid escape sequence.
        SafePrintfFormatError: If FORMAT is malformed under the ``raise`` error policy.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity = get_effective_verbosity(ctx)

    config = build_config(config_paths=config_paths, no_config=no_config)

    fmt = format_string
    if config.escapes:
        try:
            fmt = unescape(format_string)
        except UnicodeDecodeError as exc:
            raise SafePrintfUsageError(f"Invalid escape sequence in FORMAT: {exc.reason}") from exc

    try:
        items = [segment_to_dict(seg) for seg in iter_segments(fmt, on_error=config.error_handler)]
    except FormatError as exc:
        raise SafePrintfFormatError(str(exc)) from exc

    fmt_kind = output_format or OutputFormat.TEXT
    if fmt_kind == OutputFormat.JSON:
        console.print(json.dumps({"format": fmt, "segments": items}, indent=2))
    elif fmt_kind == OutputFormat.MARKDOWN:
        _render_markdown(console, fmt, items)
    else:
        _render_text(console, items, verbosity)
