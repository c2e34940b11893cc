# topmark:header:start
#
#   project      : SafePrintf
#   file         : __init__.py
#   file_relpath : src/safeprintf/format/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The format interpreter.

Components, leaves first:

- [`scanner`][safeprintf.format.scanner]: literal runs and ``%%`` escapes.
- [`parser`][safeprintf.format.parser]: one conversion spec into a ``ConversionSpec``.
- [`state`][safeprintf.format.state]: ``ConversionSpec`` into sink configuration.
- [`render`][safeprintf.format.render]: one value under the sink configuration.
- [`sequencer`][safeprintf.format.sequencer]: the whole call.
"""

from __future__ import annotations
