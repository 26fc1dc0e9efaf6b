# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Tool settings for sorbetwiz."""

from __future__ import annotations

from .loader import SETTINGS_FILENAMES, load_settings
from .models import (
    InvalidSettingsFileError,
    Settings,
    SettingsError,
    SettingsModel,
    SettingsReadError,
)

__all__ = [
    "SETTINGS_FILENAMES",
    "InvalidSettingsFileError",
    "Settings",
    "SettingsError",
    "SettingsModel",
    "SettingsReadError",
    "load_settings",
]
