# topmark:header:start
#
#   project      : SafePrintf
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the layered configuration model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from safeprintf.config.model import Config, MutableConfig
from safeprintf.core.errors import ErrorPolicy, log_error, raise_error
from tests.conftest import make_config

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    config = Config()
    assert config.error_policy is ErrorPolicy.RAISE
    assert config.error_handler is raise_error
    assert config.escapes is True
    assert config.newline is False
    assert config.coerce is True
    assert config.config_files == ()


def test_freeze_fills_unset_fields_with_defaults() -> None:
    assert MutableConfig().freeze() == Config()


def test_error_handler_follows_policy() -> None:
    config = make_config(error_policy=ErrorPolicy.LOG, newline=True)
    assert config.error_handler is log_error


def test_merge_with_prefers_set_values() -> None:
    base = MutableConfig(escapes=False, newline=True)
    top = MutableConfig(newline=False, coerce=False)
    merged = base.merge_with(top)
    assert merged.escapes is False
    assert merged.newline is False
    assert merged.coerce is False
    assert merged.error_policy is None


def test_from_toml_dict_parses_known_keys() -> None:
    draft = MutableConfig.from_toml_dict({"error_policy": "LOG", "escapes": False})
    assert draft.error_policy is ErrorPolicy.LOG
    assert draft.escapes is False
    assert draft.newline is None


def test_from_toml_dict_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError, match="error_policy"):
        MutableConfig.from_toml_dict({"error_policy": "explode"})


def test_from_toml_dict_ignores_bad_values(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        draft = MutableConfig.from_toml_dict({"newline": "yes", "colour": True})
    assert draft.newline is None
    assert "non-boolean" in caplog.text
    assert "unknown configuration key" in caplog.text


def test_to_toml_renders_settings() -> None:
    text = make_config(newline=True).to_toml()
    assert 'error_policy = "raise"' in text
    assert "newline = true" in text
    nested = Config().to_toml(for_pyproject=True)
    assert "[tool.safeprintf]" in nested


def test_load_merged_discovers_files(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text(
        '[tool.safeprintf]\nerror_policy = "log"\nnewline = true\n', encoding="utf-8"
    )
    (isolation / "safeprintf.toml").write_text("newline = false\n", encoding="utf-8")
    config = MutableConfig.load_merged().freeze()
    assert config.error_policy is ErrorPolicy.LOG
    assert config.newline is False
    assert [p.name for p in config.config_files] == ["pyproject.toml", "safeprintf.toml"]


def test_load_merged_explicit_files_win(isolation: Path, tmp_path: Path) -> None:
    (isolation / "safeprintf.toml").write_text("coerce = true\n", encoding="utf-8")
    extra = tmp_path / "extra.toml"
    extra.write_text("coerce = false\n", encoding="utf-8")
    config = MutableConfig.load_merged(extra_config_files=[extra]).freeze()
    assert config.coerce is False


def test_load_merged_no_config_skips_discovery(isolation: Path) -> None:
    (isolation / "safeprintf.toml").write_text("newline = true\n", encoding="utf-8")
    assert MutableConfig.load_merged(no_config=True).freeze() == Config()


def test_pyproject_without_section_is_ignored(isolation: Path) -> None:
    (isolation / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(isolation / "pyproject.toml") is None
