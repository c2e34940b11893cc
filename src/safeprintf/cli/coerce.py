# topmark:header:start
#
#   project      : SafePrintf
#   file         : coerce.py
#   file_relpath : src/safeprintf/cli/coerce.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shell argument handling for the `render` command.

Command line arguments always arrive as strings. Like the POSIX ``printf`` utility,
the `render` command converts each argument according to the conversion letter that
consumes it:

- integer letters (``d i u o x X p``) accept decimal, ``0x`` hex, ``0o``/leading-zero
  octal and ``0b`` binary literals;
- floating point letters (``e E f F g G a A``) accept decimal and hex float literals;
- ``c`` takes the first character of the argument;
- a leading quote (``'A`` or ``"A``) yields the code point of the next character;
- everything else is passed through unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from safeprintf.config.logging import get_logger
from safeprintf.core.spec import (
    FIXED_CONVERSIONS,
    GENERAL_CONVERSIONS,
    HEXFLOAT_CONVERSIONS,
    INTEGER_CONVERSIONS,
    SCIENTIFIC_CONVERSIONS,
    ConversionSpec,
)
from safeprintf.format.sequencer import iter_segments

if TYPE_CHECKING:
    from collections.abc import Sequence

    from safeprintf.config.logging import SafePrintfLogger
    from safeprintf.core.errors import FormatError

logger: SafePrintfLogger = get_logger(__name__)

FLOAT_CONVERSIONS = (
    SCIENTIFIC_CONVERSIONS | FIXED_CONVERSIONS | GENERAL_CONVERSIONS | HEXFLOAT_CONVERSIONS
)


class CoercedArguments(NamedTuple):
    """Result of [`coerce_arguments`][safeprintf.cli.coerce.coerce_arguments].

    Attributes:
        values (list[object]): The converted arguments, one per input argument.
        problems (list[str]): Messages for arguments that could not be converted and
            were replaced with zero.
    """

    values: list[object]
    problems: list[str]


def unescape(text: str) -> str:
    """Process backslash escapes (``\\n``, ``\\t``, ``\\xHH``, ``\\0NNN``...) in ``text``.

    Characters outside Latin-1 are preserved.

    Args:
        text (str): Text as typed on the command line.

    Returns:
        str: The text with escapes replaced.
    """
    return text.encode("latin-1", "backslashreplace").decode("unicode_escape")


def _char_constant(text: str) -> int | None:
    if len(text) > 1 and text[0] in ("'", '"'):
        return ord(text[1])
    return None


def parse_int(text: str) -> int:
    """Parse an integer argument the way the POSIX ``printf`` utility does.

    Args:
        text (str): The argument.

    Returns:
        int: The value (0 for an empty argument).

    Raises:
        ValueError: If ``text`` is not an integer literal.
    """
    stripped = text.strip()
    if not stripped:
        return 0
    code = _char_constant(stripped)
    if code is not None:
        return code
    body = stripped.lstrip("+-")
    if len(body) > 1 and body[0] == "0" and body[1].isdigit():
        return int(stripped, 8)
    return int(stripped, 0)


def parse_float(text: str) -> float:
    """Parse a floating point argument.

    Args:
        text (str): The argument.

    Returns:
        float: The value (0.0 for an empty argument).

    Raises:
        ValueError: If ``text`` is not a float literal.
    """
    stripped = text.strip()
    if not stripped:
        return 0.0
    code = _char_constant(stripped)
    if code is not None:
        return float(code)
    try:
        return float(stripped)
    except ValueError:
        return float.fromhex(stripped)


def coerce_argument(spec: ConversionSpec, text: str) -> object:
    """Convert one argument for the conversion spec consuming it.

    Args:
        spec (ConversionSpec): The consuming conversion spec.
        text (str): The argument as given on the command line.

    Returns:
        object: The converted argument.

    Raises:
        ValueError: If a numeric conversion receives a non-numeric argument.
    """
    conversion = spec.conversion
    if conversion in INTEGER_CONVERSIONS:
        return parse_int(text)
    if conversion in FLOAT_CONVERSIONS:
        return parse_float(text)
    if conversion == "c":
        return text[:1]
    return text


def _defer(error: FormatError) -> None:
    # Format errors are reported by the renderer, not while coercing
    logger.trace("Coercion stopped at %s", error)


def coerce_arguments(fmt: str, args: Sequence[str]) -> CoercedArguments:
    """Convert command line arguments for the conversion specs of ``fmt``.

    Arguments beyond the last conversion spec are passed through unchanged.

    Args:
        fmt (str): The (unescaped) format string.
        args (Sequence[str]): The arguments.

    Returns:
        CoercedArguments: The converted values and any conversion problems.
    """
    values: list[object] = list(args)
    problems: list[str] = []
    specs = (seg for seg in iter_segments(fmt, on_error=_defer) if isinstance(seg, ConversionSpec))
    for index, spec in zip(range(len(args)), specs):
        try:
            values[index] = coerce_argument(spec, args[index])
        except ValueError:
            problems.append(f"{args[index]!r}: expected a numeric value for {spec.text!r}")
            values[index] = 0.0 if spec.conversion in FLOAT_CONVERSIONS else 0
    return CoercedArguments(values, problems)
