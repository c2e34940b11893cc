# topmark:header:start
#
#   project      : SafePrintf
#   file         : errors.py
#   file_relpath : src/safeprintf/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy and error handlers for the format interpreter.

A format string is treated as a build-time contract rather than untrusted input, so
every violation is a programmer error. Violations are never returned as values:
the interpreter reports them to a single injectable *error handler*.

Usage:
    The handler is passed explicitly to the entry points::

        sformat("%d %d", 1, on_error=log_error)  # logs, renders "1 "

    The default handler, [`raise_error`][safeprintf.core.errors.raise_error], raises the
    reported error. [`log_error`][safeprintf.core.errors.log_error] logs and lets the
    interpreter continue with its best-effort recovery, and
    [`abort_process`][safeprintf.core.errors.abort_process] terminates the process.

Literal text already written to the sink before an error is never rolled back.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, NoReturn

from safeprintf.config.logging import get_logger

if TYPE_CHECKING:
    from safeprintf.config.logging import SafePrintfLogger

logger: SafePrintfLogger = get_logger(__name__)


class FormatError(Exception):
    """Base class for all format-string contract violations.

    Args:
        reason (str): Human-readable description of the violation.
        format_string (str | None): The offending format string, when known.
        position (int | None): Offset into ``format_string`` where the problem was
            detected, when known.

    Attributes:
        reason (str): Human-readable description of the violation.
        format_string (str | None): The offending format string, when known.
        position (int | None): Offset of the problem, when known.
    """

    def __init__(
        self,
        reason: str,
        *,
        format_string: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.format_string = format_string
        self.position = position

    def __str__(self) -> str:
        if self.format_string is None:
            return self.reason
        if self.position is None:
            return f"{self.reason} (in {self.format_string!r})"
        return f"{self.reason} (in {self.format_string!r} at offset {self.position})"


class MalformedSpecError(FormatError):
    """A ``%`` is not followed by a complete, letter-terminated conversion spec."""


class ArgumentCountMismatchError(FormatError):
    """The format string holds more conversion specs than there are arguments."""


class UnsupportedFeatureError(FormatError):
    """A deliberately unsupported feature was requested (``*`` width/precision, ``%n``)."""


ErrorHandler = Callable[[FormatError], None]
"""Signature of the error hook: called with the error; may raise or return."""


def raise_error(error: FormatError) -> NoReturn:
    """Default error handler: raise the reported error.

    A violation is fatal to the call by default. An uncaught exception ends the program
    much like an assertion failure would, while still letting callers and tests catch
    it. Use [`abort_process`][safeprintf.core.errors.abort_process] to terminate the
    process outright instead.

    Args:
        error (FormatError): The reported violation.

    Raises:
        FormatError: Always; ``error`` itself.
    """
    raise error


def log_error(error: FormatError) -> None:
    """Error handler that logs the violation and lets formatting continue.

    Args:
        error (FormatError): The reported violation.
    """
    logger.error("%s: %s", type(error).__name__, error)


def abort_process(error: FormatError) -> NoReturn:
    """Error handler that logs the violation and aborts the process.

    This mirrors an assertion failure: no cleanup handlers run.

    Args:
        error (FormatError): The reported violation.
    """
    logger.critical("%s: %s", type(error).__name__, error)
    os.abort()


class ErrorPolicy(str, Enum):
    """Named error handling policies, as used by configuration files and the CLI.

    Attributes:
        RAISE: Raise the error (default).
        LOG: Log the error and continue with best-effort output.
        ABORT: Log the error and abort the process.
    """

    RAISE = "raise"
    LOG = "log"
    ABORT = "abort"

    @property
    def handler(self) -> ErrorHandler:
        """The error handler implementing this policy."""
        return _POLICY_HANDLERS[self]


_POLICY_HANDLERS: dict[ErrorPolicy, ErrorHandler] = {
    ErrorPolicy.RAISE: raise_error,
    ErrorPolicy.LOG: log_error,
    ErrorPolicy.ABORT: abort_process,
}
