# topmark:header:start
#
#   project      : SafePrintf
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging helpers."""

from __future__ import annotations

import logging

import pytest

from safeprintf.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    SafePrintfLogger,
    get_logger,
    resolve_env_log_level,
)
from safeprintf.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("safeprintf.tests.trace")
    assert isinstance(logger, SafePrintfLogger)
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("fine-grained %d", 42)
    assert "fine-grained 42" in caplog.text
    assert caplog.records[-1].levelname == "TRACE"


def test_chalk_formatter_keeps_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful %s", ("now",), None)
    assert "careful now" in ChalkFormatter("%(message)s").format(record)
