"""Configuration loading for studentform."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from studentform.logging import DEFAULT_LOG_DIR, DEFAULT_LOG_LEVEL

DEFAULT_EXPORT_FILENAME = "students_data.txt"
DEFAULT_EXPORT_INDENT = 2

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        log_dir: Directory for rotating log files.
        log_level: Name of the log level.
        export_filename: File name used when saving the student records.
        export_indent: Indentation of the exported JSON payload.
    """

    log_dir: str = DEFAULT_LOG_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    export_filename: str = DEFAULT_EXPORT_FILENAME
    export_indent: int = DEFAULT_EXPORT_INDENT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from STUDENTFORM_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings, with defaults for unset variables.

        Raises:
            ConfigError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ

        log_level = env.get("STUDENTFORM_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid STUDENTFORM_LOG_LEVEL: {log_level!r}")

        export_filename = env.get("STUDENTFORM_EXPORT_FILENAME", DEFAULT_EXPORT_FILENAME)
        if not export_filename or "/" in export_filename or "\\" in export_filename:
            raise ConfigError(f"Invalid STUDENTFORM_EXPORT_FILENAME: {export_filename!r}")

        raw_indent = env.get("STUDENTFORM_EXPORT_INDENT", str(DEFAULT_EXPORT_INDENT))
        try:
            export_indent = int(raw_indent)
        except ValueError as e:
            raise ConfigError(f"Invalid STUDENTFORM_EXPORT_INDENT: {raw_indent!r}") from e
        if export_indent < 0:
            raise ConfigError(f"STUDENTFORM_EXPORT_INDENT must be >= 0, got {export_indent}")

        return cls(
            log_dir=env.get("STUDENTFORM_LOG_DIR", DEFAULT_LOG_DIR),
            log_level=log_level,
            export_filename=export_filename,
            export_indent=export_indent,
        )
