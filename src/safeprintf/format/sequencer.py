# topmark:header:start
#
#   project      : SafePrintf
#   file         : sequencer.py
#   file_relpath : src/safeprintf/format/sequencer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument sequencer: drives one top-level format call.

The sequencer alternates between two states:

- *Scanning*: the scanner copies literal text to the sink until the next ``%``.
- *Consuming*: the parser reads one conversion spec, the spec is mapped onto sink
  configuration and the next argument is rendered.

Formatting ends when the format string is exhausted. Arguments left over at that point
are ignored. Running out of arguments while specs remain is an
``ArgumentCountMismatchError``; a ``%`` without a complete spec is a
``MalformedSpecError``. After a non-raising error handler returns from either report,
formatting stops.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from safeprintf.config.logging import get_logger
from safeprintf.core.errors import ArgumentCountMismatchError, raise_error
from safeprintf.core.spec import ConversionSpec
from safeprintf.format.cursor import FormatCursor
from safeprintf.format.parser import parse_spec
from safeprintf.format.render import render_value
from safeprintf.format.scanner import scan_literal
from safeprintf.format.sink import as_configurable, configured
from safeprintf.format.state import map_spec

if TYPE_CHECKING:
    from collections.abc import Iterator

    from safeprintf.config.logging import SafePrintfLogger
    from safeprintf.core.errors import ErrorHandler
    from safeprintf.format.sink import ConfigurableSink, Sink

logger: SafePrintfLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Literal:
    """A run of literal text, with ``%%`` already collapsed to ``%``."""

    text: str


Segment = Union[Literal, ConversionSpec]


class _LiteralBuffer:
    """Sink collecting the literal text of one scan."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, text: str, /) -> int:
        self.parts.append(text)
        return len(text)

    @property
    def text(self) -> str:
        return "".join(self.parts)


def render_argument(sink: ConfigurableSink, spec: ConversionSpec, value: object) -> None:
    """Render one argument with the sink configured for ``spec``.

    The sink configuration is restored afterwards, even if rendering raises.

    Args:
        sink (ConfigurableSink): Destination.
        spec (ConversionSpec): The conversion spec consuming ``value``.
        value (object): The argument.
    """
    if spec.conversion == "n":
        # Write-back conversions are never performed; the argument is consumed silently.
        return
    config, extra = map_spec(spec)
    with configured(sink, config):
        render_value(sink, spec, value, extra)


def format_to(
    sink: Sink,
    fmt: str,
    *args: object,
    on_error: ErrorHandler = raise_error,
) -> None:
    """Render ``fmt`` with ``args`` into ``sink``.

    Args:
        sink (Sink): Destination; any object with a ``write(str)`` method.
        fmt (str): The format string.
        *args (object): The arguments, consumed left to right.
        on_error (ErrorHandler): Handler for format string violations. The default raises.
    """
    target = as_configurable(sink)
    cursor = FormatCursor(fmt)
    consumed = 0

    while scan_literal(target, cursor):
        spec = parse_spec(cursor, on_error=on_error)
        if spec is None:
            return
        if consumed >= len(args):
            on_error(
                ArgumentCountMismatchError(
                    f"Too few arguments: no argument left for conversion spec {spec.text!r}",
                    format_string=fmt,
                    position=cursor.pos,
                )
            )
            return
        render_argument(target, spec, args[consumed])
        consumed += 1

    if consumed < len(args):
        logger.debug(
            "Format string %r exhausted; ignoring %d trailing argument(s)",
            fmt,
            len(args) - consumed,
        )


def iter_segments(fmt: str, *, on_error: ErrorHandler = raise_error) -> Iterator[Segment]:
    """Split ``fmt`` into literal runs and parsed conversion specs without rendering.

    Args:
        fmt (str): The format string.
        on_error (ErrorHandler): Handler for format string violations. The default raises.

    Yields:
        Segment: ``Literal`` runs and ``ConversionSpec`` items in order of appearance.
    """
    cursor = FormatCursor(fmt)
    while True:
        buffer = _LiteralBuffer()
        more = scan_literal(buffer, cursor)
        if buffer.text:
            yield Literal(buffer.text)
        if not more:
            return
        spec = parse_spec(cursor, on_error=on_error)
        if spec is None:
            return
        yield spec
