# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Logging setup for the ``sorbetwiz`` logger tree."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Final, Literal, TypedDict, cast, override

from sorbetwiz.core.model_types import LogComponent, LogFormat
from sorbetwiz.json import normalise_enums_for_json

LOG_FORMATS: Final[tuple[Literal["text", "json"], ...]] = cast(
    "tuple[Literal['text', 'json'], ...]",
    tuple(format_.value for format_ in LogFormat),
)
LOG_LEVELS: Final[tuple[Literal["debug", "info", "warning", "error"], ...]] = (
    "debug",
    "info",
    "warning",
    "error",
)
_RECORD_FIELDS: Final = ("component", "tool", "command", "duration_ms", "exit_code", "path", "details")


class JSONLogFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({name: getattr(record, name) for name in _RECORD_FIELDS if hasattr(record, name)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(normalise_enums_for_json(payload), ensure_ascii=False)


class TextLogFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    match level.strip().lower():
        case "debug":
            return logging.DEBUG
        case "warning":
            return logging.WARNING
        case "error":
            return logging.ERROR
        case _:
            return logging.INFO


def configure_logging(log_format: LogFormat | str, *, log_level: str | int = "info") -> None:
    """Attach a single text or JSON handler to the ``sorbetwiz`` logger.

    Module loggers (``sorbetwiz.context.sorbet`` and friends) propagate to it,
    so one call covers the whole package. Calling again replaces the handler.
    """
    selected = log_format if isinstance(log_format, LogFormat) else LogFormat.from_str(log_format)
    handler = logging.StreamHandler()
    handler.setFormatter(JSONLogFormatter() if selected is LogFormat.JSON else TextLogFormatter())

    root_logger = logging.getLogger("sorbetwiz")
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_level_number(log_level))
    root_logger.propagate = False


class StructuredLogExtra(TypedDict, total=False):
    component: LogComponent
    tool: str
    command: str
    duration_ms: float
    exit_code: int
    path: str
    details: dict[str, object]


def structured_extra(
    component: LogComponent,
    *,
    tool: str | None = None,
    command: str | None = None,
    duration_ms: float | None = None,
    exit_code: int | None = None,
    path: str | os.PathLike[str] | None = None,
    details: Mapping[str, object] | None = None,
) -> StructuredLogExtra:
    """Build the ``extra=`` mapping for a log call, leaving out unset fields."""
    extra: StructuredLogExtra = {"component": component}
    if tool is not None:
        extra["tool"] = tool
    if command is not None:
        extra["command"] = command
    if duration_ms is not None:
        extra["duration_ms"] = round(duration_ms, 3)
    if exit_code is not None:
        extra["exit_code"] = exit_code
    if path is not None:
        extra["path"] = os.fspath(path)
    if details:
        extra["details"] = dict(details)
    return extra


__all__ = ["LOG_FORMATS", "LOG_LEVELS", "StructuredLogExtra", "configure_logging", "structured_extra"]
