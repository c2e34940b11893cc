# topmark:header:start
#
#   project      : SafePrintf
#   file         : test_render_value.py
#   file_relpath : tests/format/test_render_value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for per-argument rendering."""

from __future__ import annotations

import ctypes
from decimal import Decimal
from fractions import Fraction

from safeprintf.api import sformat
from safeprintf.core.chars import Char, SignedChar, UnsignedChar
from safeprintf.core.spec import ConversionSpec
from safeprintf.format.render import (
    Rendered,
    format_integer,
    pad,
    render_printable,
    render_truncated,
    to_address,
    to_char,
)
from safeprintf.format.state import Alignment, NumericBase, SinkConfiguration
from tests.conftest import parametrize


@parametrize(
    "fmt, value, expected",
    [
        ("%d", 42, "42"),
        ("%d", -42, "-42"),
        ("%5d", 42, "   42"),
        ("%-5d|", 42, "42   |"),
        ("%05d", 42, "00042"),
        ("%05d", -42, "-0042"),
        ("%+d", 5, "+5"),
        ("%+d", -5, "-5"),
        ("%+d", 0, "+0"),
        ("%x", 255, "ff"),
        ("%X", 255, "FF"),
        ("%#x", 255, "0xff"),
        ("%#X", 255, "0XFF"),
        ("%#x", 0, "0"),
        ("%o", 8, "10"),
        ("%#o", 8, "010"),
        ("%x", -255, "-ff"),
        ("%+x", 255, "ff"),
        ("%#08x", 255, "0x0000ff"),
        ("%u", 7, "7"),
        ("%i", 7, "7"),
        ("%lld", 2**40, "1099511627776"),
    ],
)
def test_integers(fmt: str, value: int, expected: str) -> None:
    assert sformat(fmt, value) == expected


@parametrize(
    "fmt, value, expected",
    [
        ("%f", 3.14159, "3.141590"),
        ("%.2f", 3.14159, "3.14"),
        ("%8.3f", 3.14159, "   3.142"),
        ("%-8.1f|", 2.5, "2.5     |"),
        ("%08.2f", -1.5, "-0001.50"),
        ("%+.1f", 1.0, "+1.0"),
        ("%e", 12345.678, "1.234568e+04"),
        ("%.2E", 12345.678, "1.23E+04"),
        ("%g", 0.0001, "0.0001"),
        ("%g", 100000.0, "100000"),
        ("%g", 1000000.0, "1e+06"),
        ("%G", 0.00001234, "1.234E-05"),
        ("%#.0f", 3.0, "3."),
        ("%.0f", 3.0, "3"),
        ("%s", 3.5, "3.5"),
        ("%f", float("inf"), "inf"),
        ("%F", float("inf"), "INF"),
    ],
)
def test_floats(fmt: str, value: float, expected: str) -> None:
    assert sformat(fmt, value) == expected


def test_decimal_and_fraction_render_as_reals() -> None:
    assert sformat("%.2f", Decimal("2.5")) == "2.50"
    assert sformat("%.3f", Fraction(1, 4)) == "0.250"


@parametrize(
    "fmt, value, expected",
    [
        ("%e", Decimal("1.5"), "1.500000e+00"),
        ("%E", Decimal("-0.00015"), "-1.500000E-04"),
        ("%.2e", Decimal("12345678901234567890"), "1.23e+19"),
        ("%g", Decimal("1e5"), "100000"),
        ("%g", Decimal("1e6"), "1e+06"),
        ("%g", Decimal("0.0001"), "0.0001"),
        ("%g", Decimal("0.00001234"), "1.234e-05"),
        ("%G", Decimal("1.5E-7"), "1.5E-07"),
        ("%.3g", Decimal("2.5"), "2.5"),
        ("%+g", Decimal("100"), "+100"),
        ("%e", Decimal("0"), "0.000000e+00"),
        ("%f", Decimal("NaN"), "nan"),
        ("%s", Decimal("2.5"), "2.5"),
    ],
)
def test_decimal_follows_c_notation(fmt: str, value: Decimal, expected: str) -> None:
    assert sformat(fmt, value) == expected


def test_integer_under_float_conversion_renders_as_integer() -> None:
    assert sformat("%f", 3) == "3"


@parametrize(
    "fmt, value, expected",
    [
        ("%s", "hello", "hello"),
        ("%10s", "hello", "     hello"),
        ("%-10s|", "hello", "hello     |"),
        ("%.3s", "hello", "hel"),
        ("%.10s", "hello", "hello"),
        ("%6.2s|", "hello", "    he|"),
        ("%-6.2s|", "hello", "he    |"),
        ("%.0s|", "hello", "|"),
        ("%s", b"abc\0def", "abc"),
        ("%.2s", b"abc", "ab"),
        ("%s", bytearray(b"xyz"), "xyz"),
        ("%s", None, "None"),
        ("%s", [1, 2], "[1, 2]"),
        ("%.3s", 3.14159, "3.1"),
        ("%.2s", 12345, "12"),
    ],
)
def test_strings(fmt: str, value: object, expected: str) -> None:
    assert sformat(fmt, value) == expected


def test_truncated_iterator_reads_only_precision_elements() -> None:
    chars = iter("abcdef")
    assert sformat("%.3s", chars) == "abc"
    assert next(chars) == "d"


@parametrize(
    "fmt, value, expected",
    [
        ("% d", 5, " 5"),
        ("% d", -5, "-5"),
        ("% 5d", 5, "    5"),
        ("% 05d", 5, " 0005"),
        ("%+ d", 5, "+5"),
        ("% .2f", 1.5, " 1.50"),
        ("% .2f", -1.5, "-1.50"),
        ("% s", "+5", "+5"),
    ],
)
def test_space_flag(fmt: str, value: object, expected: str) -> None:
    assert sformat(fmt, value) == expected


@parametrize(
    "fmt, value, expected",
    [
        ("%.4d", 7, "0007"),
        ("%.4d", -7, "-007"),
        ("%.4x", 255, "00ff"),
        ("%.2d", 12345, "12345"),
        ("%.0d", 7, "7"),
    ],
)
def test_integer_precision(fmt: str, value: int, expected: str) -> None:
    assert sformat(fmt, value) == expected


@parametrize(
    "value, expected",
    [
        (65, "A"),
        (-1, "\xff"),
        ("x", "x"),
        (b"y", "y"),
        (Char("z"), "z"),
        (UnsignedChar(66), "B"),
        (SignedChar(67), "C"),
        (ctypes.c_char(b"D"), "D"),
        (ctypes.c_ubyte(69), "E"),
    ],
)
def test_char_conversion(value: object, expected: str) -> None:
    assert sformat("%c", value) == expected


def test_char_conversion_falls_back_to_printable() -> None:
    assert sformat("%c", "long") == "long"
    assert sformat("%c", 2.5) == "2.5"
    assert sformat("%3c", 65) == "  A"


@parametrize(
    "fmt, value, expected",
    [
        ("%d", Char("A"), "65"),
        ("%x", Char("A"), "41"),
        ("%s", Char("A"), "A"),
        ("%d", UnsignedChar(200), "200"),
        ("%s", UnsignedChar(65), "A"),
        ("%d", SignedChar(-1), "-1"),
        ("%u", ctypes.c_char(b"A"), "65"),
        ("%s", ctypes.c_char(b"A"), "A"),
        ("%d", ctypes.c_byte(-3), "-3"),
        ("%s", ctypes.c_ubyte(97), "a"),
    ],
)
def test_narrow_characters(fmt: str, value: object, expected: str) -> None:
    assert sformat(fmt, value) == expected


@parametrize(
    "fmt, value, expected",
    [
        ("%s", True, "True"),
        ("%d", True, "1"),
        ("%x", False, "0"),
        ("%c", True, "\x01"),
    ],
)
def test_bool(fmt: str, value: bool, expected: str) -> None:
    assert sformat(fmt, value) == expected


def test_pointer_of_object_uses_identity() -> None:
    obj = object()
    assert sformat("%p", obj) == f"0x{id(obj):x}"


def test_pointer_of_none_is_null() -> None:
    assert sformat("%p", None) == "0x0"


def test_pointer_of_number_renders_hex() -> None:
    assert sformat("%p", 255) == "ff"


def test_pointer_of_ctypes_pointer_does_not_dereference() -> None:
    value = ctypes.c_int(5)
    pointer = ctypes.pointer(value)
    assert sformat("%p", pointer) == f"0x{ctypes.addressof(value):x}"
    assert sformat("%p", ctypes.c_void_p(0x1000)) == "0x1000"
    assert sformat("%p", ctypes.c_void_p()) == "0x0"


def test_capability_defaults() -> None:
    assert to_char(object()) is None
    assert to_char(-1) == "\xff"
    assert to_char(0x110041) == "A"
    assert to_char(False) == "\x00"
    assert to_char("ab") is None
    assert to_address(3.5) is None
    assert render_truncated(42, 1) is None
    assert render_truncated("abc", 2) == "ab"


class Money:
    def __init__(self, cents: int) -> None:
        self.cents = cents


@render_printable.register(Money)
def _render_money(value: Money, config: SinkConfiguration, spec: ConversionSpec) -> Rendered:
    whole, cents = divmod(abs(value.cents), 100)
    rendered = format_integer(whole if value.cents >= 0 else -whole, config)
    return Rendered(rendered.prefix, f"{rendered.body}.{cents:02d}")


def test_user_types_register_their_rendering() -> None:
    assert sformat("%s", Money(1234)) == "12.34"
    assert sformat("%+8s|", Money(1234)) == "  +12.34|"
    assert sformat("%08s", Money(-1234)) == "-0012.34"


def test_pad_alignments() -> None:
    rendered = Rendered("-0x", "1f")
    assert pad(rendered, SinkConfiguration(width=8)) == "   -0x1f"
    assert pad(rendered, SinkConfiguration(width=8, alignment=Alignment.LEFT)) == "-0x1f   "
    internal = SinkConfiguration(width=8, alignment=Alignment.INTERNAL, fill="0")
    assert pad(rendered, internal) == "-0x0001f"
    assert pad(rendered, SinkConfiguration(width=2)) == "-0x1f"


def test_format_integer_prefixes() -> None:
    hex_config = SinkConfiguration(base=NumericBase.HEX, show_base=True, uppercase=True)
    assert format_integer(-26, hex_config) == Rendered("-0X", "1A")
    assert format_integer(5, SinkConfiguration(show_pos=True)) == Rendered("+", "5")
