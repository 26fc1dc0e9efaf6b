# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Settings discovery and loading for sorbetwiz.

Settings are read from ``sorbetwiz.toml`` or ``.sorbetwiz.toml`` in the project
root, or from the ``[tool.sorbetwiz]`` table of ``pyproject.toml``. Without any
settings file the defaults apply.
"""

from __future__ import annotations

import logging
import tomllib as toml
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from sorbetwiz._internal.logging_utils import structured_extra
from sorbetwiz.core.model_types import LogComponent

from .models import InvalidSettingsFileError, Settings, SettingsModel, SettingsReadError, settings_from_model

logger: logging.Logger = logging.getLogger("sorbetwiz.settings")

SETTINGS_FILENAMES: Final[tuple[str, ...]] = ("sorbetwiz.toml", ".sorbetwiz.toml", "pyproject.toml")


def _tool_section(raw_map: dict[str, object]) -> dict[str, object] | None:
    tool_obj = raw_map.get("tool")
    if not isinstance(tool_obj, dict):
        return None
    section = cast("dict[str, object]", tool_obj).get("sorbetwiz")
    if not isinstance(section, dict):
        return None
    return cast("dict[str, object]", section)


def _read_toml(path: Path) -> dict[str, object]:
    try:
        return toml.loads(path.read_text(encoding="utf-8"))
    except (OSError, toml.TOMLDecodeError) as exc:
        raise SettingsReadError(path, exc) from exc


def load_settings(explicit_path: Path | None = None, *, root: Path | None = None) -> Settings:
    """Load sorbetwiz settings from a TOML file or fall back to defaults.

    Args:
        explicit_path: Settings file to read. When given, only this file is
            considered and it must exist.
        root: Directory searched for settings files when ``explicit_path`` is
            not given. Defaults to the current working directory.

    Returns:
        The resolved ``Settings``.

    Raises:
        SettingsReadError: If a settings file cannot be read or parsed as TOML.
        InvalidSettingsFileError: If a settings file fails validation.
    """
    if explicit_path is not None:
        candidates = [explicit_path]
    else:
        base = root or Path.cwd()
        candidates = [base / name for name in SETTINGS_FILENAMES]

    for candidate in candidates:
        if explicit_path is None and not candidate.is_file():
            continue
        raw_map = _read_toml(candidate)
        section = _tool_section(raw_map)
        if candidate.name == "pyproject.toml":
            if section is None:
                continue
            raw_map = section
        elif section is not None:
            raw_map = section
        try:
            model = SettingsModel.model_validate(raw_map)
        except ValidationError as exc:
            raise InvalidSettingsFileError(candidate, exc) from exc
        logger.debug(
            "Loaded settings from %s",
            candidate,
            extra=structured_extra(LogComponent.SETTINGS, path=candidate),
        )
        return settings_from_model(model)

    return Settings()


__all__ = ["SETTINGS_FILENAMES", "load_settings"]
