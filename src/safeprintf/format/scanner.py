# topmark:header:start
#
#   project      : SafePrintf
#   file         : scanner.py
#   file_relpath : src/safeprintf/format/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scanner for literal runs of a format string.

The scanner copies literal text to the sink until it reaches the next unescaped ``%``.
An escaped ``%%`` is written as a single ``%`` and does not end the literal run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from safeprintf.format.cursor import FormatCursor
    from safeprintf.format.sink import Sink


def scan_literal(sink: Sink, cursor: FormatCursor) -> bool:
    """Write the literal run at ``cursor`` to ``sink``.

    Args:
        sink (Sink): Destination for the literal text.
        cursor (FormatCursor): Read position; advanced past the literal run and the
            ``%`` that ends it.

    Returns:
        bool: True if a conversion spec follows (the cursor is just past its ``%``,
            possibly at the end of the string for a trailing lone ``%``); False if the
            format string is exhausted.
    """
    text = cursor.text
    parts: list[str] = []
    found_spec = False
    while not cursor.at_end:
        idx = cursor.find("%")
        if idx < 0:
            parts.append(cursor.advance(len(text) - cursor.pos))
            break
        parts.append(text[cursor.pos : idx])
        if text.startswith("%%", idx):
            parts.append("%")
            cursor.advance(idx + 2 - cursor.pos)
            continue
        cursor.advance(idx + 1 - cursor.pos)
        found_spec = True
        break

    literal = "".join(parts)
    if literal:
        sink.write(literal)
    return found_spec
