# topmark:header:start
#
#   project      : SafePrintf
#   file         : __init__.py
#   file_relpath : src/safeprintf/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the SafePrintf CLI."""
