# topmark:header:start
#
#   project      : SafePrintf
#   file         : render.py
#   file_relpath : src/safeprintf/format/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of a single argument under the current sink configuration.

Rendering is driven by four capabilities, each a ``functools.singledispatch`` function
so that new types can opt in without touching this module:

- [`render_printable`][safeprintf.format.render.render_printable]: the default textual
  representation. Every type has one (``str(value)`` unless a more specific
  registration exists). Numbers honor base, notation, case, sign and prefix settings.
- [`to_char`][safeprintf.format.render.to_char]: narrowing to a single character, used
  by ``%c``. Returns None when the value cannot be narrowed.
- [`to_address`][safeprintf.format.render.to_address]: address identity, used by ``%p``.
  Never reads through the reference. Returns None for plain numbers, which then print
  themselves in hexadecimal.
- [`render_truncated`][safeprintf.format.render.render_truncated]: reads at most N
  characters of a sequence, used by ``%.Ns``. Returns None when unsupported.

Example:
    Registering a custom type::

        @render_printable.register(Money)
        def _(value: Money, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
            return Rendered("", f"{value.amount:.2f} {value.currency}")

Rendered values keep the sign and base prefix (``-``, ``+``, ``0x``) apart from the
digits so that internal alignment (``%08d``) can put the fill between them.
"""

from __future__ import annotations

import ctypes
import numbers
import re
from collections.abc import Iterator
from dataclasses import replace
from decimal import Decimal
from functools import singledispatch
from itertools import islice
from typing import TYPE_CHECKING, Final, NamedTuple

from safeprintf.config.logging import get_logger
from safeprintf.core.chars import Char, SignedChar, UnsignedChar
from safeprintf.core.spec import NUMERIC_CHAR_CONVERSIONS, ConversionSpec
from safeprintf.format.state import (
    Alignment,
    ExtraFlags,
    FloatNotation,
    NumericBase,
    SinkConfiguration,
)

if TYPE_CHECKING:
    from safeprintf.config.logging import SafePrintfLogger
    from safeprintf.format.sink import ConfigurableSink

logger: SafePrintfLogger = get_logger(__name__)


class Rendered(NamedTuple):
    """Text of one rendered value, before padding.

    Attributes:
        prefix (str): Sign and base prefix of a number (e.g. ``"-0x"``); empty for text.
        body (str): Everything else.
    """

    prefix: str
    body: str

    @property
    def text(self) -> str:
        """The full rendered text."""
        return self.prefix + self.body


_NOTATION_TYPES: Final[dict[FloatNotation, str]] = {
    FloatNotation.FIXED: "f",
    FloatNotation.SCIENTIFIC: "e",
    FloatNotation.DEFAULT: "g",
}

_NUL: Final[bytes] = b"\0"

_SHORT_EXPONENT: Final[re.Pattern[str]] = re.compile(r"([eE][+-])(\d)$")


# --- numeric primitives -----------------------------------------------------------------


def format_integer(value: int, config: SinkConfiguration) -> Rendered:
    """Render an integer honoring base, case, show-base and show-pos settings.

    ``+`` is only shown in decimal. The base prefix is omitted for zero, as in C.

    Args:
        value (int): The integer.
        config (SinkConfiguration): Active configuration.

    Returns:
        Rendered: Sign and prefix, then digits.
    """
    magnitude = abs(value)
    base_prefix = ""
    if config.base is NumericBase.HEX:
        digits = format(magnitude, "X" if config.uppercase else "x")
        if config.show_base and magnitude:
            base_prefix = "0X" if config.uppercase else "0x"
    elif config.base is NumericBase.OCTAL:
        digits = format(magnitude, "o")
        if config.show_base and magnitude:
            base_prefix = "0"
    else:
        digits = str(magnitude)

    if value < 0:
        sign = "-"
    elif config.show_pos and config.base is NumericBase.DECIMAL:
        sign = "+"
    else:
        sign = ""
    return Rendered(sign + base_prefix, digits)


def _pad_exponent(text: str) -> str:
    """Widen a one-digit exponent to two digits, as C does (``1e+5`` -> ``1e+05``)."""
    return _SHORT_EXPONENT.sub(r"\g<1>0\g<2>", text)


def _strip_zeros(text: str) -> str:
    """Drop trailing fractional zeros (and a dangling point) from a ``%g`` result."""
    mantissa, marker, exponent = text.partition("e" if "e" in text else "E")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return mantissa + marker + exponent


def format_decimal(value: Decimal, kind: str, precision: int, sign: str) -> str:
    """Format a finite, non-zero `Decimal` following C's rules for doubles.

    Decimal's own mini-language writes one-digit exponents and switches ``g`` to
    exponent form on a different threshold. Here the exponent has at least two digits
    and ``g`` uses exponent form when the exponent is below -4 or not below the
    precision. The digits themselves stay exact.

    Args:
        value (Decimal): The number.
        kind (str): One of ``f F e E g G``.
        precision (int): Digits after the point (``f``/``e``) or significant digits (``g``).
        sign (str): ``"+"`` to always show the sign, ``"-"`` otherwise.

    Returns:
        str: The formatted number, sign included.
    """
    if kind in "fF":
        return format(value, f"{sign}.{precision}f")
    exp_kind = "E" if kind in "EG" else "e"
    if kind in "eE":
        return _pad_exponent(format(value, f"{sign}.{precision}{exp_kind}"))

    significant = precision or 1
    scientific = format(value, f"{sign}.{significant - 1}{exp_kind}")
    exponent = int(scientific.rpartition(exp_kind)[2])
    if -4 <= exponent < significant:
        return _strip_zeros(format(value, f"{sign}.{significant - 1 - exponent}f"))
    return _strip_zeros(_pad_exponent(scientific))


def format_real(value: float | Decimal, config: SinkConfiguration) -> Rendered:
    """Render a floating point number honoring notation, precision and case.

    Args:
        value (float | Decimal): The number.
        config (SinkConfiguration): Active configuration.

    Returns:
        Rendered: Sign, then the rest of the number.
    """
    kind = _NOTATION_TYPES[config.notation]
    if config.uppercase:
        kind = kind.upper()
    sign = "+" if config.show_pos else "-"
    if isinstance(value, Decimal) and value.is_finite() and not value.is_zero():
        # No alternate form for Decimal
        text = format_decimal(value, kind, config.precision, sign)
    else:
        alternate = "#" if config.show_point and not isinstance(value, Decimal) else ""
        # Decimal zeros and specials take the float spelling (0.000000e+00, nan, inf)
        text = format(float(value), f"{sign}{alternate}.{config.precision}{kind}")
    if text[:1] in ("+", "-"):
        return Rendered(text[0], text[1:])
    return Rendered("", text)


def _decode_c_string(data: bytes) -> str:
    """Decode bytes up to (excluding) the first NUL."""
    return data.split(_NUL, 1)[0].decode("utf-8", errors="backslashreplace")


# --- default printable rendering --------------------------------------------------------


@singledispatch
def render_printable(value: object, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    """Render ``value`` using its own textual representation.

    Register more specific implementations with ``render_printable.register(SomeType)``.

    Args:
        value (object): The argument.
        config (SinkConfiguration): Active configuration.
        spec (ConversionSpec): The conversion being rendered.

    Returns:
        Rendered: The unpadded text.
    """
    return Rendered("", str(value))


@render_printable.register(str)
def _render_str(value: str, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    return Rendered("", value)


@render_printable.register(bytes)
@render_printable.register(bytearray)
@render_printable.register(memoryview)
def _render_bytes(
    value: bytes | bytearray | memoryview, config: SinkConfiguration, spec: ConversionSpec
) -> Rendered:
    # C string semantics: stop at the first NUL
    return Rendered("", _decode_c_string(bytes(value)))


@render_printable.register(numbers.Integral)
def _render_integral(
    value: numbers.Integral, config: SinkConfiguration, spec: ConversionSpec
) -> Rendered:
    return format_integer(int(value), config)


@render_printable.register(int)
def _render_int(value: int, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    return format_integer(value, config)


@render_printable.register(bool)
def _render_bool(value: bool, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    if spec.conversion in NUMERIC_CHAR_CONVERSIONS:
        return format_integer(int(value), config)
    return Rendered("", str(value))


@render_printable.register(numbers.Real)
def _render_real(
    value: numbers.Real, config: SinkConfiguration, spec: ConversionSpec
) -> Rendered:
    return format_real(float(value), config)


@render_printable.register(float)
def _render_float(value: float, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    return format_real(value, config)


@render_printable.register(Decimal)
def _render_decimal(value: Decimal, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    return format_real(value, config)


# Narrow character kinds: numbers under integer conversions, glyphs otherwise.


@render_printable.register(Char)
def _render_char(value: Char, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    if spec.conversion in NUMERIC_CHAR_CONVERSIONS:
        return format_integer(value.code, config)
    return Rendered("", str(value))


@render_printable.register(SignedChar)
@render_printable.register(UnsignedChar)
def _render_byte_char(
    value: SignedChar | UnsignedChar, config: SinkConfiguration, spec: ConversionSpec
) -> Rendered:
    if spec.conversion in NUMERIC_CHAR_CONVERSIONS:
        return format_integer(value.code, config)
    return Rendered("", value.glyph)


@render_printable.register(ctypes.c_char)
def _render_c_char(
    value: ctypes.c_char, config: SinkConfiguration, spec: ConversionSpec
) -> Rendered:
    code = value.value[0] if value.value else 0
    if spec.conversion in NUMERIC_CHAR_CONVERSIONS:
        return format_integer(code, config)
    return Rendered("", chr(code))


@render_printable.register(ctypes.c_byte)
@render_printable.register(ctypes.c_ubyte)
def _render_c_byte(
    value: ctypes.c_byte | ctypes.c_ubyte, config: SinkConfiguration, spec: ConversionSpec
) -> Rendered:
    if spec.conversion in NUMERIC_CHAR_CONVERSIONS:
        return format_integer(value.value, config)
    return Rendered("", chr(value.value & 0xFF))


# --- %c: narrowing to a character -------------------------------------------------------


@singledispatch
def to_char(value: object) -> str | None:
    """Narrow ``value`` to a single character for ``%c``.

    Args:
        value (object): The argument.

    Returns:
        str | None: The character, or None if ``value`` cannot be narrowed.
    """
    return None


@to_char.register(int)
def _int_to_char(value: int) -> str | None:
    if 0 <= value <= 0x10FFFF:
        return chr(value)
    # Outside the code point range, narrow like a C char
    return chr(value & 0xFF)


@to_char.register(str)
def _str_to_char(value: str) -> str | None:
    return value if len(value) == 1 else None


@to_char.register(bytes)
@to_char.register(bytearray)
def _bytes_to_char(value: bytes | bytearray) -> str | None:
    return chr(value[0]) if len(value) == 1 else None


@to_char.register(SignedChar)
@to_char.register(UnsignedChar)
def _byte_char_to_char(value: SignedChar | UnsignedChar) -> str | None:
    return value.glyph


@to_char.register(ctypes.c_char)
def _c_char_to_char(value: ctypes.c_char) -> str | None:
    return chr(value.value[0]) if value.value else "\0"


@to_char.register(ctypes.c_byte)
@to_char.register(ctypes.c_ubyte)
def _c_byte_to_char(value: ctypes.c_byte | ctypes.c_ubyte) -> str | None:
    return chr(value.value & 0xFF)


# --- %p: address identity ---------------------------------------------------------------


@singledispatch
def to_address(value: object) -> int | None:
    """Return the address identity of ``value`` for ``%p``.

    The default is the object's identity (``id``); the referenced object is never
    inspected.

    Args:
        value (object): The argument.

    Returns:
        int | None: The address, or None when ``value`` has no address identity.
    """
    return id(value)


@to_address.register(numbers.Number)
def _number_address(value: numbers.Number) -> int | None:
    return None


@to_address.register(type(None))
def _none_address(value: None) -> int | None:
    return 0


@to_address.register(ctypes.c_void_p)
def _void_p_address(value: ctypes.c_void_p) -> int | None:
    return value.value or 0


@to_address.register(ctypes.c_char_p)
@to_address.register(ctypes.c_wchar_p)
@to_address.register(ctypes._Pointer)  # pyright: ignore[reportPrivateUsage]
def _pointer_address(value: object) -> int | None:
    # Cast instead of .value/.contents: never dereference
    return ctypes.cast(value, ctypes.c_void_p).value or 0


# --- %.Ns: truncated reads --------------------------------------------------------------


@singledispatch
def render_truncated(value: object, limit: int) -> str | None:
    """Render at most ``limit`` characters of a sequence-like ``value``.

    Implementations must not read past ``limit`` elements.

    Args:
        value (object): The argument.
        limit (int): Maximum number of characters.

    Returns:
        str | None: The truncated text, or None if ``value`` does not support truncated reads.
    """
    return None


@render_truncated.register(str)
def _truncate_str(value: str, limit: int) -> str | None:
    return value[:limit]


@render_truncated.register(bytes)
@render_truncated.register(bytearray)
@render_truncated.register(memoryview)
def _truncate_bytes(value: bytes | bytearray | memoryview, limit: int) -> str | None:
    return _decode_c_string(bytes(value[:limit]))


@render_truncated.register(Iterator)
def _truncate_iterator(value: Iterator[object], limit: int) -> str | None:
    return "".join(str(item) for item in islice(value, limit))


# --- orchestration ----------------------------------------------------------------------


def render_unpadded(value: object, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    """Dispatch ``value`` to the ``%c``, ``%p`` or default rendering.

    Args:
        value (object): The argument.
        config (SinkConfiguration): Active configuration.
        spec (ConversionSpec): The conversion being rendered.

    Returns:
        Rendered: The unpadded text.
    """
    if spec.conversion == "c":
        char = to_char(value)
        if char is not None:
            return Rendered("", char)
    elif spec.conversion == "p":
        address = to_address(value)
        if address is not None:
            return Rendered("0x", format(address, "x"))
    return render_printable(value, config, spec)


def pad(rendered: Rendered, config: SinkConfiguration) -> str:
    """Pad ``rendered`` to the configured width.

    Args:
        rendered (Rendered): The unpadded text.
        config (SinkConfiguration): Active configuration.

    Returns:
        str: The padded text; unchanged when it already fills the width.
    """
    text = rendered.text
    gap = config.width - len(text)
    if gap <= 0:
        return text
    filler = config.fill * gap
    if config.alignment is Alignment.LEFT:
        return text + filler
    if config.alignment is Alignment.INTERNAL:
        return rendered.prefix + filler + rendered.body
    return filler + text


def _render_buffered(
    value: object,
    config: SinkConfiguration,
    spec: ConversionSpec,
    extra: ExtraFlags,
) -> Rendered:
    """Render through an intermediate buffer to emulate the extra flags."""
    rendered: Rendered | None = None
    truncate = ExtraFlags.TRUNCATE_TO_PRECISION in extra
    space_pad = ExtraFlags.SPACE_PAD_POSITIVE in extra

    if truncate:
        text = render_truncated(value, config.precision)
        if text is not None:
            rendered = Rendered("", text)
    if rendered is None:
        # Render with a forced sign; the sign is swapped for a space below
        buffer_config = replace(config, show_pos=True) if space_pad else config
        rendered = render_unpadded(value, buffer_config, spec)

    if space_pad and rendered.prefix.startswith("+"):
        rendered = Rendered(" " + rendered.prefix[1:], rendered.body)
    if truncate and len(rendered.text) > config.precision:
        rendered = Rendered("", rendered.text[: config.precision])
    return rendered


def render_value(
    sink: ConfigurableSink,
    spec: ConversionSpec,
    value: object,
    extra: ExtraFlags = ExtraFlags.NONE,
) -> None:
    """Render one argument to ``sink`` under the sink's current configuration.

    Dispatch order:
        1. ``%c`` with a value that narrows to a character: that character.
        2. ``%p`` with a value that has an address identity: ``0x`` and the address.
        3. Otherwise the value's default printable rendering.

    With extra flags the value is rendered into a buffer first, then truncated to
    ``precision`` characters and/or has its leading ``+`` replaced by a space, before
    being padded to the field width.

    Args:
        sink (ConfigurableSink): Destination, already configured for this argument.
        spec (ConversionSpec): The conversion being rendered.
        value (object): The argument.
        extra (ExtraFlags): Behaviors to emulate.
    """
    config = sink.config
    if extra:
        rendered = _render_buffered(value, config, spec, extra)
    else:
        rendered = render_unpadded(value, config, spec)
    text = pad(rendered, config)
    logger.trace("Rendered %s with %r as %r", spec.text, type(value).__name__, text)
    sink.write(text)
