"""Walk settings.

This module provides the settings model and I/O functions for the
defaults a walk run falls back to when an option is not given on the
command line: extension filter, minimum size, minimum name length and
delete log destination.

Settings are stored in ~/.config/walkctl/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from walkctl.core.paths import get_settings_path

logger = logging.getLogger(__name__)


def check_extension(ext: str) -> str:
    """Validate an extension filter entry such as ".log".

    Raises:
        ValueError: If ext lacks the leading dot or has nothing after it.
    """
    if not ext.startswith(".") or len(ext) < 2:
        msg = f"extension must start with '.' and name a suffix, got {ext!r}"
        raise ValueError(msg)
    return ext


class WalkSettings(BaseModel):
    """Default options for walk runs.

    Attributes:
        extensions: Extensions to keep, each starting with a dot.
        min_size: Minimum file size in bytes.
        name_length: Minimum characters in the file name (0 = no filter).
        log_file: Delete log destination (None = standard output).
    """

    model_config = ConfigDict(extra="forbid")

    extensions: Annotated[
        list[str],
        Field(description="Extensions to keep, e.g. ['.log']"),
    ] = []
    min_size: Annotated[
        int,
        Field(ge=0, description="Minimum file size in bytes"),
    ] = 0
    name_length: Annotated[
        int,
        Field(ge=0, description="Minimum characters in the file name"),
    ] = 0
    log_file: Annotated[
        Path | None,
        Field(description="Append deletion records to this file"),
    ] = None

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        """Require every extension to start with a dot."""
        return [check_extension(ext) for ext in v]


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> WalkSettings:
    """Load settings from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated WalkSettings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or its content doesn't
            match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return WalkSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return WalkSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: WalkSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The WalkSettings object to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    data = settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def settings_to_dict(settings: WalkSettings) -> dict[str, object]:
    """Convert WalkSettings to a dictionary for TOML serialization.

    TOML has no null, so an unset log_file is omitted.
    """
    result: dict[str, object] = {
        "extensions": list(settings.extensions),
        "min_size": settings.min_size,
        "name_length": settings.name_length,
    }
    if settings.log_file is not None:
        result["log_file"] = str(settings.log_file)
    return result
