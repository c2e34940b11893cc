# topmark:header:start
#
#   project      : SafePrintf
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading and rendering helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from safeprintf.config.io import extract_section, load_toml_dict, to_toml

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_reads_plain_values(tmp_path: Path) -> None:
    path = tmp_path / "safeprintf.toml"
    path.write_text('error_policy = "log"\nescapes = false\n', encoding="utf-8")
    assert load_toml_dict(path) == {"error_policy": "log", "escapes": False}


def test_load_toml_dict_returns_empty_on_errors(tmp_path: Path) -> None:
    assert load_toml_dict(tmp_path / "missing.toml") == {}
    broken = tmp_path / "broken.toml"
    broken.write_text("this is = = not toml", encoding="utf-8")
    assert load_toml_dict(broken) == {}


def test_extract_section(tmp_path: Path) -> None:
    data = {"tool": {"safeprintf": {"newline": True}, "other": {}}}
    assert extract_section(data, tmp_path / "pyproject.toml") == {"newline": True}
    assert extract_section({"newline": True}, tmp_path / "safeprintf.toml") == {"newline": True}
    assert extract_section({"tool": {}}, tmp_path / "pyproject.toml") == {}


def test_to_toml_nests_sections() -> None:
    text = to_toml({"newline": True, "skipped": None}, section="tool.safeprintf")
    assert "[tool.safeprintf]" in text
    assert "newline = true" in text
    assert "skipped" not in text
