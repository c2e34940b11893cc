# topmark:header:start
#
#   project      : SafePrintf
#   file         : state.py
#   file_relpath : src/safeprintf/format/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mapping of conversion specs onto sink configuration.

A sink carries a small set of persistent formatting knobs (alignment, fill, numeric
base, float notation, case, width, precision). [`map_spec`][safeprintf.format.state.map_spec]
translates a [`ConversionSpec`][safeprintf.core.spec.ConversionSpec] into such a
[`SinkConfiguration`][safeprintf.format.state.SinkConfiguration], starting from the
C99 defaults every time.

Two printf behaviors have no equivalent knob and are returned separately as
[`ExtraFlags`][safeprintf.format.state.ExtraFlags]; the renderer emulates them by
post-processing buffered text:

- ``TRUNCATE_TO_PRECISION``: ``%.3s`` prints at most three characters.
- ``SPACE_PAD_POSITIVE``: ``% d`` prints a space where ``%+d`` would print ``+``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import TYPE_CHECKING, Final

from safeprintf.constants import DEFAULT_FILL, DEFAULT_PRECISION
from safeprintf.core.spec import (
    FIXED_CONVERSIONS,
    HEX_CONVERSIONS,
    OCTAL_CONVERSIONS,
    SCIENTIFIC_CONVERSIONS,
    UPPERCASE_CONVERSIONS,
    FormatFlag,
)

if TYPE_CHECKING:
    from safeprintf.core.spec import ConversionSpec


class Alignment(str, Enum):
    """Placement of the value within the field width.

    Attributes:
        LEFT: Value first, fill after.
        RIGHT: Fill first, value after.
        INTERNAL: Sign and base prefix first, then fill, then digits.
    """

    LEFT = "left"
    RIGHT = "right"
    INTERNAL = "internal"


class NumericBase(str, Enum):
    """Radix used to render integers."""

    DECIMAL = "decimal"
    OCTAL = "octal"
    HEX = "hex"


class FloatNotation(str, Enum):
    """Notation used to render floating point numbers.

    Attributes:
        FIXED: ``%f``; ``precision`` digits after the decimal point.
        SCIENTIFIC: ``%e``; one digit before the point, exponent after.
        DEFAULT: ``%g``; shortest of the two, ``precision`` significant digits.
    """

    FIXED = "fixed"
    SCIENTIFIC = "scientific"
    DEFAULT = "default"


class ExtraFlags(Flag):
    """Behaviors with no direct sink configuration equivalent."""

    NONE = 0
    TRUNCATE_TO_PRECISION = auto()
    SPACE_PAD_POSITIVE = auto()


@dataclass(frozen=True, slots=True)
class SinkConfiguration:
    """Formatting state applied to a sink while one argument is rendered.

    The defaults are the C99 defaults: right alignment, space fill, decimal base,
    default float notation, no minimum width and a precision of 6.

    Attributes:
        alignment (Alignment): Placement within ``width``.
        fill (str): Single padding character.
        base (NumericBase): Radix for integers.
        notation (FloatNotation): Notation for floating point numbers.
        uppercase (bool): Use uppercase hex digits, exponent markers and prefixes.
        show_base (bool): Prefix octal with ``0`` and hex with ``0x``.
        show_point (bool): Always render a decimal point for floats.
        show_pos (bool): Render ``+`` for non-negative decimal numbers.
        width (int): Minimum field width (0 means none).
        precision (int): Float precision.
    """

    alignment: Alignment = Alignment.RIGHT
    fill: str = DEFAULT_FILL
    base: NumericBase = NumericBase.DECIMAL
    notation: FloatNotation = FloatNotation.DEFAULT
    uppercase: bool = False
    show_base: bool = False
    show_point: bool = False
    show_pos: bool = False
    width: int = 0
    precision: int = DEFAULT_PRECISION

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this configuration."""
        return {
            "alignment": self.alignment.value,
            "fill": self.fill,
            "base": self.base.value,
            "notation": self.notation.value,
            "uppercase": self.uppercase,
            "show_base": self.show_base,
            "show_point": self.show_point,
            "show_pos": self.show_pos,
            "width": self.width,
            "precision": self.precision,
        }


DEFAULT_CONFIGURATION: Final[SinkConfiguration] = SinkConfiguration()


def _base_for(conversion: str) -> NumericBase:
    if conversion in OCTAL_CONVERSIONS:
        return NumericBase.OCTAL
    if conversion in HEX_CONVERSIONS:
        return NumericBase.HEX
    return NumericBase.DECIMAL


def _notation_for(conversion: str) -> FloatNotation:
    if conversion in SCIENTIFIC_CONVERSIONS:
        return FloatNotation.SCIENTIFIC
    if conversion in FIXED_CONVERSIONS:
        return FloatNotation.FIXED
    # %g and everything else let the value pick the shortest form
    return FloatNotation.DEFAULT


def map_spec(spec: ConversionSpec) -> tuple[SinkConfiguration, ExtraFlags]:
    """Translate a conversion spec into sink configuration and extra flags.

    This is a pure function: it always starts from
    [`DEFAULT_CONFIGURATION`][safeprintf.format.state.DEFAULT_CONFIGURATION] and never
    looks at the sink's current state.

    Rules:
        - ``-`` selects left alignment with space fill and always wins over ``0``.
        - ``0`` selects internal alignment with ``0`` fill, so ``-5`` pads as ``-0005``.
        - ``+`` shows the sign and always wins over the space flag.
        - ``#`` shows the numeric base prefix and the decimal point.
        - For integer conversions (``d i u o x X p``) with a precision but no width,
          the precision becomes the width with internal alignment and ``0`` fill:
          ``%.4d`` renders ``7`` as ``0007``.
        - ``%s`` with an explicit precision sets ``TRUNCATE_TO_PRECISION``.
        - The space flag without ``+`` sets ``SPACE_PAD_POSITIVE``.

    Args:
        spec (ConversionSpec): The parsed conversion spec.

    Returns:
        tuple[SinkConfiguration, ExtraFlags]: The configuration to apply while rendering
            the argument, and the behaviors the renderer must emulate.
    """
    extra = ExtraFlags.NONE

    alignment = Alignment.RIGHT
    fill = DEFAULT_FILL
    if spec.has(FormatFlag.LEFT_ALIGN):
        alignment = Alignment.LEFT
    elif spec.has(FormatFlag.ZERO_PAD):
        alignment = Alignment.INTERNAL
        fill = "0"

    show_pos = spec.has(FormatFlag.PLUS_SIGN)
    if spec.has(FormatFlag.SPACE_SIGN) and not show_pos:
        extra |= ExtraFlags.SPACE_PAD_POSITIVE

    alternate = spec.has(FormatFlag.ALTERNATE_FORM)
    width = spec.width if spec.width is not None else 0
    precision = spec.precision if spec.precision is not None else DEFAULT_PRECISION

    conversion = spec.conversion
    if conversion == "s" and spec.precision is not None:
        extra |= ExtraFlags.TRUNCATE_TO_PRECISION

    if spec.is_integer_conversion and spec.precision is not None and spec.width is None:
        # "Minimum digits" expressed with width/alignment/fill only
        width = spec.precision
        alignment = Alignment.INTERNAL
        fill = "0"

    config = SinkConfiguration(
        alignment=alignment,
        fill=fill,
        base=_base_for(conversion),
        notation=_notation_for(conversion),
        uppercase=conversion in UPPERCASE_CONVERSIONS,
        show_base=alternate,
        show_point=alternate,
        show_pos=show_pos,
        width=width,
        precision=precision,
    )
    return config, extra

