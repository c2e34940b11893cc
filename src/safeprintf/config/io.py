# topmark:header:start
#
#   project      : SafePrintf
#   file         : io.py
#   file_relpath : src/safeprintf/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render SafePrintf TOML configuration.

Configuration lives either in a dedicated ``safeprintf.toml`` (keys at the top level)
or in the ``[tool.safeprintf]`` table of ``pyproject.toml``.

Parsing is done with `tomlkit` and returned as plain `dict` structures; rendering also
goes through `tomlkit` so that generated files use the same formatting conventions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from safeprintf.config.logging import get_logger
from safeprintf.constants import PYPROJECT_FILE_NAME, PYPROJECT_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from safeprintf.config.logging import SafePrintfLogger

TomlTable = dict[str, Any]

logger: SafePrintfLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_section(data: TomlTable, path: Path) -> TomlTable:
    """Return the SafePrintf table of a parsed TOML document.

    For ``pyproject.toml`` this is the ``[tool.safeprintf]`` table (empty if absent);
    for any other file the whole document.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): Path the document was read from.

    Returns:
        TomlTable: The configuration table.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for key in PYPROJECT_SECTION.split("."):
        table = table.get(key, {}) if isinstance(table, dict) else {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def to_toml(data: TomlTable, *, section: str | None = None) -> str:
    """Render a configuration table as TOML text.

    Args:
        data (TomlTable): The configuration values; ``None`` values are omitted.
        section (str | None): Optional dotted table name to nest the values under
            (e.g. ``"tool.safeprintf"``).

    Returns:
        str: The TOML document.
    """
    doc = tomlkit.document()
    target: Any = doc
    if section:
        for key in section.split("."):
            table = tomlkit.table(is_super_table=key != section.split(".")[-1])
            target.add(key, table)
            target = table
    for key, value in data.items():
        if value is not None:
            target.add(key, value)
    return tomlkit.dumps(doc)
