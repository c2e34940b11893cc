# topmark:header:start
#
#   project      : SafePrintf
#   file         : __init__.py
#   file_relpath : src/safeprintf/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for SafePrintf.

This module exposes a small, typed surface for rendering printf-style format strings
from Python code:

- [`format_to`][safeprintf.api.format_to]: render into any sink (the core entry point).
- [`sformat`][safeprintf.api.sformat]: render into a new string.
- [`printf`][safeprintf.api.printf]: render to standard output.
- [`fprintf`][safeprintf.api.fprintf]: render to a text stream.
- [`iter_segments`][safeprintf.api.iter_segments]: split a format string without rendering.
- [`parse_spec_text`][safeprintf.api.parse_spec_text]: parse a single ``%...`` spec.

Examples:
    ```python
    from safeprintf.api import sformat

    sformat("%s, %s %d, %.2d:%.2d", "Wednesday", "July", 27, 14, 4)
    # 'Wednesday, July 27, 14:04'
    ```

All entry points accept an ``on_error`` keyword: the error handler invoked for format
string violations (see [`safeprintf.core.errors`][]). The default raises.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from safeprintf.core.errors import MalformedSpecError, raise_error
from safeprintf.format.cursor import FormatCursor
from safeprintf.format.parser import parse_spec
from safeprintf.format.sequencer import Literal, Segment, format_to, iter_segments
from safeprintf.format.sink import TextSink

if TYPE_CHECKING:
    from safeprintf.core.errors import ErrorHandler
    from safeprintf.core.spec import ConversionSpec
    from safeprintf.format.sink import Sink

__all__ = [
    "Literal",
    "Segment",
    "format_to",
    "fprintf",
    "iter_segments",
    "parse_spec_text",
    "printf",
    "sformat",
]


def sformat(fmt: str, *args: object, on_error: ErrorHandler = raise_error) -> str:
    """Render ``fmt`` with ``args`` and return the result.

    Args:
        fmt (str): The format string.
        *args (object): The arguments.
        on_error (ErrorHandler): Handler for format string violations.

    Returns:
        str: The rendered text.
    """
    sink = TextSink()
    format_to(sink, fmt, *args, on_error=on_error)
    return sink.getvalue()


def fprintf(stream: Sink, fmt: str, *args: object, on_error: ErrorHandler = raise_error) -> None:
    """Render ``fmt`` with ``args`` to ``stream``.

    Args:
        stream (Sink): Destination text stream.
        fmt (str): The format string.
        *args (object): The arguments.
        on_error (ErrorHandler): Handler for format string violations.
    """
    format_to(stream, fmt, *args, on_error=on_error)


def printf(fmt: str, *args: object, on_error: ErrorHandler = raise_error) -> None:
    """Render ``fmt`` with ``args`` to standard output.

    Args:
        fmt (str): The format string.
        *args (object): The arguments.
        on_error (ErrorHandler): Handler for format string violations.
    """
    format_to(sys.stdout, fmt, *args, on_error=on_error)


def parse_spec_text(text: str, *, on_error: ErrorHandler = raise_error) -> ConversionSpec | None:
    """Parse one conversion spec such as ``"%-08.3lf"``.

    Args:
        text (str): The spec, starting with ``%`` and ending with its conversion letter.
        on_error (ErrorHandler): Handler for format string violations.

    Returns:
        ConversionSpec | None: The parsed spec, or None when the text is malformed and
            ``on_error`` did not raise.
    """
    if not text.startswith("%") or text.startswith("%%"):
        on_error(
            MalformedSpecError(
                "Conversion spec must start with a single '%'", format_string=text, position=0
            )
        )
        return None
    cursor = FormatCursor(text, pos=1)
    spec = parse_spec(cursor, on_error=on_error)
    if spec is not None and not cursor.at_end:
        on_error(
            MalformedSpecError(
                f"Unexpected text {cursor.rest!r} after conversion spec",
                format_string=text,
                position=cursor.pos,
            )
        )
        return None
    return spec
