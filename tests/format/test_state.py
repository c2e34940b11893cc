# topmark:header:start
#
#   project      : SafePrintf
#   file         : test_state.py
#   file_relpath : tests/format/test_state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for mapping conversion specs onto sink configuration."""

from __future__ import annotations

from safeprintf.api import parse_spec_text
from safeprintf.format.state import (
    DEFAULT_CONFIGURATION,
    Alignment,
    ExtraFlags,
    FloatNotation,
    NumericBase,
    SinkConfiguration,
    map_spec,
)
from tests.conftest import parametrize


def _map(text: str) -> tuple[SinkConfiguration, ExtraFlags]:
    spec = parse_spec_text(text)
    assert spec is not None
    return map_spec(spec)


def test_plain_spec_maps_to_defaults() -> None:
    config, extra = _map("%s")
    assert config == DEFAULT_CONFIGURATION
    assert extra == ExtraFlags.NONE


def test_defaults_are_c99_defaults() -> None:
    assert DEFAULT_CONFIGURATION.alignment is Alignment.RIGHT
    assert DEFAULT_CONFIGURATION.fill == " "
    assert DEFAULT_CONFIGURATION.base is NumericBase.DECIMAL
    assert DEFAULT_CONFIGURATION.notation is FloatNotation.DEFAULT
    assert DEFAULT_CONFIGURATION.width == 0
    assert DEFAULT_CONFIGURATION.precision == 6


@parametrize(
    "text, base, uppercase",
    [
        ("%d", NumericBase.DECIMAL, False),
        ("%i", NumericBase.DECIMAL, False),
        ("%u", NumericBase.DECIMAL, False),
        ("%o", NumericBase.OCTAL, False),
        ("%x", NumericBase.HEX, False),
        ("%X", NumericBase.HEX, True),
        ("%p", NumericBase.HEX, False),
    ],
)
def test_integer_letters_select_base(text: str, base: NumericBase, uppercase: bool) -> None:
    config, _ = _map(text)
    assert config.base is base
    assert config.uppercase is uppercase


@parametrize(
    "text, notation, uppercase",
    [
        ("%e", FloatNotation.SCIENTIFIC, False),
        ("%E", FloatNotation.SCIENTIFIC, True),
        ("%f", FloatNotation.FIXED, False),
        ("%F", FloatNotation.FIXED, True),
        ("%g", FloatNotation.DEFAULT, False),
        ("%G", FloatNotation.DEFAULT, True),
        ("%a", FloatNotation.DEFAULT, False),
    ],
)
def test_float_letters_select_notation(
    text: str, notation: FloatNotation, uppercase: bool
) -> None:
    config, _ = _map(text)
    assert config.notation is notation
    assert config.uppercase is uppercase


def test_left_align_wins_over_zero_pad() -> None:
    config, _ = _map("%-05d")
    assert config.alignment is Alignment.LEFT
    assert config.fill == " "
    assert config.width == 5


def test_zero_pad_selects_internal_alignment() -> None:
    config, _ = _map("%08.3f")
    assert config.alignment is Alignment.INTERNAL
    assert config.fill == "0"
    assert config.width == 8
    assert config.precision == 3


def test_plus_wins_over_space() -> None:
    config, extra = _map("% +d")
    assert config.show_pos is True
    assert ExtraFlags.SPACE_PAD_POSITIVE not in extra


def test_space_flag_sets_space_pad() -> None:
    config, extra = _map("% d")
    assert config.show_pos is False
    assert ExtraFlags.SPACE_PAD_POSITIVE in extra


def test_alternate_form_shows_base_and_point() -> None:
    config, _ = _map("%#x")
    assert config.show_base is True
    assert config.show_point is True


def test_string_precision_sets_truncation() -> None:
    _, extra = _map("%.3s")
    assert ExtraFlags.TRUNCATE_TO_PRECISION in extra
    _, extra = _map("%3s")
    assert ExtraFlags.TRUNCATE_TO_PRECISION not in extra


def test_integer_precision_is_promoted_to_width() -> None:
    config, extra = _map("%.4d")
    assert config.width == 4
    assert config.alignment is Alignment.INTERNAL
    assert config.fill == "0"
    assert extra == ExtraFlags.NONE


def test_integer_precision_with_width_is_not_promoted() -> None:
    config, _ = _map("%8.4d")
    assert config.width == 8
    assert config.alignment is Alignment.RIGHT
    assert config.fill == " "


def test_float_precision_is_not_promoted() -> None:
    config, _ = _map("%.2f")
    assert config.width == 0
    assert config.precision == 2


def test_to_dict_is_json_friendly() -> None:
    config, _ = _map("%-10.2e")
    data = config.to_dict()
    assert data["alignment"] == "left"
    assert data["notation"] == "scientific"
    assert data["width"] == 10
    assert data["precision"] == 2
