# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Settings models and validation for sorbetwiz.

Settings are loaded from TOML through a Pydantic model and converted into a
frozen dataclass used at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sorbetwiz._internal.exceptions import SorbetwizValidationError
from sorbetwiz._internal.logging_utils import LOG_LEVELS
from sorbetwiz.core.model_types import LogFormat

if TYPE_CHECKING:
    from pathlib import Path


class SettingsError(SorbetwizValidationError):
    """Raised when sorbetwiz settings contain invalid values."""


class InvalidSettingsFileError(SettingsError):
    """Raised when a settings file fails schema validation."""

    def __init__(self, path: Path, error: ValidationError) -> None:
        """Initialize the exception with the settings file path and validation error.

        Args:
            path: The settings file that failed validation.
            error: The Pydantic validation error describing the failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid sorbetwiz settings in {path}: {error}")


class SettingsReadError(SettingsError):
    """Raised when a settings file cannot be read or is not valid TOML."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class SettingsModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", validate_default=True)

    sorbet_bin: str | None = None
    bundler_version: str | None = None
    capture_err: bool = True
    log_format: LogFormat = LogFormat.TEXT
    log_level: str = Field(default="info")

    @field_validator("sorbet_bin", "bundler_version", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().lower()
        if level not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            raise ValueError(f"log_level must be one of: {allowed}")
        return level


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime settings for running Bundler and Sorbet.

    Attributes:
        sorbet_bin: Explicit Sorbet binary; ``None`` runs ``bundle exec srb``.
        bundler_version: Bundler version to pin with ``bundle _<version>_``.
        capture_err: Whether stderr of child processes is captured.
        log_format: Log output format.
        log_level: Log verbosity.
    """

    sorbet_bin: str | None = None
    bundler_version: str | None = None
    capture_err: bool = True
    log_format: LogFormat = LogFormat.TEXT
    log_level: str = "info"


def settings_from_model(model: SettingsModel) -> Settings:
    return Settings(
        sorbet_bin=model.sorbet_bin,
        bundler_version=model.bundler_version,
        capture_err=model.capture_err,
        log_format=model.log_format,
        log_level=model.log_level,
    )


__all__ = [
    "InvalidSettingsFileError",
    "Settings",
    "SettingsError",
    "SettingsModel",
    "SettingsReadError",
    "settings_from_model",
]
