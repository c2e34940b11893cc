# topmark:header:start
#
#   project      : SafePrintf
#   file         : __init__.py
#   file_relpath : src/safeprintf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SafePrintf package.

SafePrintf interprets C99 ``printf`` format strings at runtime. Every argument is
rendered according to its own Python type, so a mismatched conversion letter never
reads memory it should not: it simply changes how the value is presented.

The public entry points live in [`safeprintf.api`][] and are re-exported here.
"""

from __future__ import annotations

from safeprintf.api import (
    fprintf,
    format_to,
    iter_segments,
    parse_spec_text,
    printf,
    sformat,
)
from safeprintf.core.chars import Char, SignedChar, UnsignedChar
from safeprintf.core.errors import (
    ArgumentCountMismatchError,
    ErrorHandler,
    ErrorPolicy,
    FormatError,
    MalformedSpecError,
    UnsupportedFeatureError,
    abort_process,
    log_error,
    raise_error,
)
from safeprintf.core.spec import ConversionSpec, FormatFlag
from safeprintf.format.render import (
    render_printable,
    render_truncated,
    to_address,
    to_char,
)
from safeprintf.format.sink import TextSink

__all__ = [
    "ArgumentCountMismatchError",
    "Char",
    "ConversionSpec",
    "ErrorHandler",
    "ErrorPolicy",
    "FormatError",
    "FormatFlag",
    "MalformedSpecError",
    "SignedChar",
    "TextSink",
    "UnsignedChar",
    "UnsupportedFeatureError",
    "abort_process",
    "format_to",
    "fprintf",
    "iter_segments",
    "log_error",
    "parse_spec_text",
    "printf",
    "raise_error",
    "render_printable",
    "render_truncated",
    "sformat",
    "to_address",
    "to_char",
]
