# topmark:header:start
#
#   project      : SafePrintf
#   file         : constants.py
#   file_relpath : src/safeprintf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SafePrintf Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SAFEPRINTF_VERSION: str = get_version("safeprintf")

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "SAFEPRINTF_LOG_LEVEL"

# Configuration file names looked up in the working directory:
CONFIG_FILE_NAME: str = "safeprintf.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.safeprintf"

# C99 defaults applied before every conversion:
DEFAULT_PRECISION: int = 6
DEFAULT_FILL: str = " "
