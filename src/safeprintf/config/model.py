# topmark:header:start
#
#   project      : SafePrintf
#   file         : model.py
#   file_relpath : src/safeprintf/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for SafePrintf.

The library entry points take their only configurable seam, the error handler, as an
explicit argument. This model holds the settings of the command line tool, which are
layered from TOML files and CLI options:

1. Built-in defaults.
2. ``pyproject.toml`` (``[tool.safeprintf]``) in the working directory.
3. ``safeprintf.toml`` in the working directory.
4. Files passed explicitly with ``--config`` (in the order given).
5. CLI options.

Build configs using `MutableConfig` (mutable), then `freeze()` into a `Config`.
`Config.to_toml()` renders the effective settings (see the ``dump-config`` command).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from safeprintf.config.io import extract_section, load_toml_dict, to_toml
from safeprintf.config.logging import get_logger
from safeprintf.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME
from safeprintf.core.errors import ErrorPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from safeprintf.config.io import TomlTable
    from safeprintf.config.logging import SafePrintfLogger
    from safeprintf.core.errors import ErrorHandler

logger: SafePrintfLogger = get_logger(__name__)

KEY_ERROR_POLICY = "error_policy"
KEY_ESCAPES = "escapes"
KEY_NEWLINE = "newline"
KEY_COERCE = "coerce"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for the SafePrintf CLI.

    Attributes:
        error_policy (ErrorPolicy): How format string violations are handled.
        escapes (bool): Interpret backslash escapes (``\\n``, ``\\t``, ``\\x41``...) in the
            format string.
        newline (bool): Append a newline after the rendered output.
        coerce (bool): Convert string arguments to numbers according to the conversion
            letter consuming them.
        config_files (tuple[Path, ...]): Configuration files that contributed values.
    """

    error_policy: ErrorPolicy = ErrorPolicy.RAISE
    escapes: bool = True
    newline: bool = False
    coerce: bool = True
    config_files: tuple[Path, ...] = ()

    @property
    def error_handler(self) -> ErrorHandler:
        """The error handler implementing `error_policy`."""
        return self.error_policy.handler

    def to_toml_dict(self) -> TomlTable:
        """Return the TOML-serializable settings (without provenance)."""
        return {
            KEY_ERROR_POLICY: self.error_policy.value,
            KEY_ESCAPES: self.escapes,
            KEY_NEWLINE: self.newline,
            KEY_COERCE: self.coerce,
        }

    def to_toml(self, *, for_pyproject: bool = False) -> str:
        """Render the settings as TOML text.

        Args:
            for_pyproject (bool): If True, nest the output under ``[tool.safeprintf]``.

        Returns:
            str: TOML document text.
        """
        return to_toml(self.to_toml_dict(), section="tool.safeprintf" if for_pyproject else None)


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while merging layers.

    Fields left as None inherit the value of the layer below when merged, and fall back
    to the `Config` defaults when frozen.

    Attributes:
        error_policy (ErrorPolicy | None): Error policy, or None to inherit.
        escapes (bool | None): Escape processing, or None to inherit.
        newline (bool | None): Trailing newline, or None to inherit.
        coerce (bool | None): Argument coercion, or None to inherit.
        config_files (list[Path]): Configuration files that contributed values.
    """

    error_policy: ErrorPolicy | None = None
    escapes: bool | None = None
    newline: bool | None = None
    coerce: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        defaults = Config()
        return Config(
            error_policy=(
                self.error_policy if self.error_policy is not None else defaults.error_policy
            ),
            escapes=self.escapes if self.escapes is not None else defaults.escapes,
            newline=self.newline if self.newline is not None else defaults.newline,
            coerce=self.coerce if self.coerce is not None else defaults.coerce,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose set values win.

        Returns:
            MutableConfig: The merged draft.
        """
        return MutableConfig(
            error_policy=(
                other.error_policy if other.error_policy is not None else self.error_policy
            ),
            escapes=other.escapes if other.escapes is not None else self.escapes,
            newline=other.newline if other.newline is not None else self.newline,
            coerce=other.coerce if other.coerce is not None else self.coerce,
            config_files=[*self.config_files, *other.config_files],
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a draft from a parsed configuration table.

        Unknown keys and values of the wrong type are logged and ignored.

        Args:
            data (Mapping[str, Any]): The configuration table.
            config_file (Path | None): File the table was read from, for provenance.

        Returns:
            MutableConfig: The draft.

        Raises:
            ValueError: If ``error_policy`` names an unknown policy.
        """
        draft = cls(config_files=[config_file] if config_file is not None else [])
        for key, value in data.items():
            if key == KEY_ERROR_POLICY:
                if not isinstance(value, str):
                    logger.warning("Ignoring non-string %s=%r in %s", key, value, config_file)
                    continue
                try:
                    draft.error_policy = ErrorPolicy(value.lower())
                except ValueError as exc:
                    choices = ", ".join(p.value for p in ErrorPolicy)
                    raise ValueError(
                        f"Invalid {key} {value!r} in {config_file}; expected one of: {choices}"
                    ) from exc
            elif key in (KEY_ESCAPES, KEY_NEWLINE, KEY_COERCE):
                if not isinstance(value, bool):
                    logger.warning("Ignoring non-boolean %s=%r in %s", key, value, config_file)
                    continue
                setattr(draft, key, value)
            else:
                logger.warning("Ignoring unknown configuration key %r in %s", key, config_file)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``safeprintf.toml`` and ``pyproject.toml`` (``[tool.safeprintf]``).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None if the file holds no SafePrintf settings.
        """
        data = extract_section(load_toml_dict(path), path)
        if not data:
            logger.debug("No SafePrintf configuration in %s", path)
            return None
        logger.debug("Loaded configuration from %s: %s", path, data)
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_config_files(cls, anchor: Path) -> list[Path]:
        """Return the configuration files present in ``anchor``, lowest precedence first.

        Args:
            anchor (Path): Directory to look in.

        Returns:
            list[Path]: Existing ``pyproject.toml`` and ``safeprintf.toml`` paths.
        """
        candidates = (anchor / PYPROJECT_FILE_NAME, anchor / CONFIG_FILE_NAME)
        return [path for path in candidates if path.is_file()]

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Directory to discover files in (the CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit files merged last.
            no_config (bool): If True, skip discovery.

        Returns:
            MutableConfig: The merged draft.
        """
        draft = cls()
        paths: list[Path] = []
        if not no_config:
            paths.extend(cls.discover_config_files(anchor or Path.cwd()))
        paths.extend(Path(p) for p in extra_config_files or ())

        for path in paths:
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft
