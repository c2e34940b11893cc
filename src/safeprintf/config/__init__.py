# topmark:header:start
#
#   project      : SafePrintf
#   file         : __init__.py
#   file_relpath : src/safeprintf/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for SafePrintf.

This package holds the logging setup (with a TRACE level and chalk-colored output) and
the TOML-based configuration model used by the command line tool
([`safeprintf.config.model`][]). Import the model from its module; this package must
stay importable before `safeprintf.core`.
"""

from __future__ import annotations
