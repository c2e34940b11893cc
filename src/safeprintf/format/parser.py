# topmark:header:start
#
#   project      : SafePrintf
#   file         : parser.py
#   file_relpath : src/safeprintf/format/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser for a single C99 conversion spec.

Grammar (after the ``%``)::

    [flags][width][.precision][length]conv

    flags     := any of "#0- +"
    width     := decimal digits            ("*" is reported as unsupported)
    precision := "." [decimal digits]      (".*" is reported as unsupported,
                                            ".-N" is parsed and discarded)
    length    := any of "lhLjzt"           (consumed and ignored)
    conv      := the first ASCII letter that is not a length modifier

Violations are reported to the error handler passed in by the caller. When the handler
returns instead of raising, parsing recovers where it can: an unsupported ``*`` is
skipped and treated as absent, a missing conversion letter ends the parse with None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from safeprintf.config.logging import get_logger
from safeprintf.core.errors import MalformedSpecError, UnsupportedFeatureError, raise_error
from safeprintf.core.spec import FLAG_CHARS, LENGTH_MODIFIERS, ConversionSpec

if TYPE_CHECKING:
    from safeprintf.config.logging import SafePrintfLogger
    from safeprintf.core.errors import ErrorHandler, FormatError
    from safeprintf.core.spec import FormatFlag
    from safeprintf.format.cursor import FormatCursor

logger: SafePrintfLogger = get_logger(__name__)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_terminator(ch: str) -> bool:
    return _is_letter(ch) and ch not in LENGTH_MODIFIERS


def _report(
    on_error: ErrorHandler,
    error_cls: type[FormatError],
    reason: str,
    cursor: FormatCursor,
) -> None:
    on_error(error_cls(reason, format_string=cursor.text, position=cursor.pos))


def parse_spec(
    cursor: FormatCursor,
    *,
    on_error: ErrorHandler = raise_error,
) -> ConversionSpec | None:
    """Parse one conversion spec.

    Args:
        cursor (FormatCursor): Read position just past the ``%``; advanced past the
            conversion letter.
        on_error (ErrorHandler): Handler for malformed or unsupported specs.

    Returns:
        ConversionSpec | None: The parsed spec, or None if the format string ended before
            a conversion letter (after reporting ``MalformedSpecError``).
    """
    start = max(cursor.pos - 1, 0)

    # 1) Flags, in any order
    flags: set[FormatFlag] = set()
    while cursor.peek() in FLAG_CHARS:
        flags.add(FLAG_CHARS[cursor.advance()])

    # 2) Width
    width: int | None = None
    digits = cursor.take_while(_is_digit)
    if digits:
        width = int(digits)
    if cursor.peek() == "*":
        _report(on_error, UnsupportedFeatureError, "Variable field widths not supported", cursor)
        cursor.advance()

    # 3) Precision
    precision: int | None = None
    if cursor.peek() == ".":
        cursor.advance()
        if cursor.peek() == "*":
            _report(on_error, UnsupportedFeatureError, "Variable precision not supported", cursor)
            cursor.advance()
        elif cursor.peek() == "-":
            # Negative precision: parsed and discarded
            cursor.advance()
            cursor.take_while(_is_digit)
        else:
            digits = cursor.take_while(_is_digit)
            precision = int(digits) if digits else 0

    # 4) Length modifiers, ignored
    cursor.take_while(lambda ch: ch in LENGTH_MODIFIERS)

    # 5) Conversion letter
    skipped = cursor.take_while(lambda ch: not _is_terminator(ch))
    if cursor.at_end:
        _report(
            on_error,
            MalformedSpecError,
            "Conversion spec incorrectly terminated by end of string",
            cursor,
        )
        return None
    if any(ch not in LENGTH_MODIFIERS for ch in skipped):
        logger.warning(
            "Skipped unexpected characters %r in conversion spec %r",
            skipped,
            cursor.text[start : cursor.pos + 1],
        )

    conversion = cursor.advance()
    spec = ConversionSpec(
        conversion=conversion,
        flags=frozenset(flags),
        width=width,
        precision=precision,
        text=cursor.text[start : cursor.pos],
    )
    logger.trace("Parsed conversion spec %r -> %s", spec.text, spec)

    if conversion == "n":
        _report(on_error, UnsupportedFeatureError, "%n conversion spec not supported", cursor)
    elif not spec.is_known_conversion:
        logger.warning("Unknown conversion letter %r in %r", conversion, spec.text)
    return spec
