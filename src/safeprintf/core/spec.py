# topmark:header:start
#
#   project      : SafePrintf
#   file         : spec.py
#   file_relpath : src/safeprintf/core/spec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical conversion-spec model.

A [`ConversionSpec`][safeprintf.core.spec.ConversionSpec] is the stream-agnostic result of
parsing one ``%[flags][width][.precision][length]conv`` token. It is immutable and scoped
to the formatting of a single argument.

The letter tables below are the single source of truth for which conversion letters
select which behavior; the parser, the state mapper and the renderer all consult them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class FormatFlag(str, Enum):
    """C99 flag characters accepted between ``%`` and the width.

    Attributes:
        ALTERNATE_FORM: ``#``; show the numeric base prefix and always show the decimal point.
        ZERO_PAD: ``0``; pad numbers with zeros after the sign. Ignored with ``LEFT_ALIGN``.
        LEFT_ALIGN: ``-``; left-align within the field width.
        SPACE_SIGN: `` `` (space); prefix non-negative numbers with a space.
            Ignored with ``PLUS_SIGN``.
        PLUS_SIGN: ``+``; always show the sign of signed numbers.
    """

    ALTERNATE_FORM = "#"
    ZERO_PAD = "0"
    LEFT_ALIGN = "-"
    SPACE_SIGN = " "
    PLUS_SIGN = "+"


FLAG_CHARS: Final[dict[str, FormatFlag]] = {flag.value: flag for flag in FormatFlag}

# C99 length modifiers: consumed for grammar compatibility, behaviorally inert.
LENGTH_MODIFIERS: Final[frozenset[str]] = frozenset("lhLjzt")

# Conversion letter tables
DECIMAL_CONVERSIONS: Final[frozenset[str]] = frozenset("diu")
OCTAL_CONVERSIONS: Final[frozenset[str]] = frozenset("o")
HEX_CONVERSIONS: Final[frozenset[str]] = frozenset("xXp")
SCIENTIFIC_CONVERSIONS: Final[frozenset[str]] = frozenset("eE")
FIXED_CONVERSIONS: Final[frozenset[str]] = frozenset("fF")
GENERAL_CONVERSIONS: Final[frozenset[str]] = frozenset("gG")
HEXFLOAT_CONVERSIONS: Final[frozenset[str]] = frozenset("aA")
UPPERCASE_CONVERSIONS: Final[frozenset[str]] = frozenset("XEFG")

# Letters for which precision means "minimum number of digits".
INTEGER_CONVERSIONS: Final[frozenset[str]] = (
    DECIMAL_CONVERSIONS | OCTAL_CONVERSIONS | HEX_CONVERSIONS
)

# Letters for which narrow character kinds render as numbers instead of glyphs.
NUMERIC_CHAR_CONVERSIONS: Final[frozenset[str]] = frozenset("udioXx")

KNOWN_CONVERSIONS: Final[frozenset[str]] = (
    INTEGER_CONVERSIONS
    | SCIENTIFIC_CONVERSIONS
    | FIXED_CONVERSIONS
    | GENERAL_CONVERSIONS
    | HEXFLOAT_CONVERSIONS
    | frozenset("csn")
)


@dataclass(frozen=True, slots=True)
class ConversionSpec:
    """Parsed representation of one conversion specifier.

    Attributes:
        conversion (str): The terminating conversion letter (e.g. ``"d"``).
        flags (frozenset[FormatFlag]): Flags present in the spec, order-insensitive.
        width (int | None): Minimum field width, or None when absent.
        precision (int | None): Precision, or None when absent.
        text (str): The raw spec text including the leading ``%`` (diagnostics only).
    """

    conversion: str
    flags: frozenset[FormatFlag] = frozenset()
    width: int | None = None
    precision: int | None = None
    text: str = ""

    def has(self, flag: FormatFlag) -> bool:
        """Return True if ``flag`` is present in this spec."""
        return flag in self.flags

    @property
    def is_integer_conversion(self) -> bool:
        """True for ``d i u o x X p``."""
        return self.conversion in INTEGER_CONVERSIONS

    @property
    def is_known_conversion(self) -> bool:
        """True for the fixed C99 letter set."""
        return self.conversion in KNOWN_CONVERSIONS

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this spec."""
        return {
            "text": self.text,
            "conversion": self.conversion,
            # Keep a stable, grammar-ordered flag listing
            "flags": [flag.value for flag in FormatFlag if flag in self.flags],
            "width": self.width,
            "precision": self.precision,
        }
