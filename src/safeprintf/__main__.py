# topmark:header:start
#
#   project      : SafePrintf
#   file         : __main__.py
#   file_relpath : src/safeprintf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SafePrintf via ``python -m safeprintf``.

It delegates directly to :func:`safeprintf.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how SafePrintf is launched.

Examples:
    Render a format string using the module interface::

        python -m safeprintf render "%-8s|%5.2f\n" total 3.14159
"""

from __future__ import annotations

from safeprintf.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
