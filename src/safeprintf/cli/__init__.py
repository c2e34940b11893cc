# topmark:header:start
#
#   project      : SafePrintf
#   file         : __init__.py
#   file_relpath : src/safeprintf/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for SafePrintf.

The entry point is [`safeprintf.cli.main.cli`][safeprintf.cli.main.cli].
"""
