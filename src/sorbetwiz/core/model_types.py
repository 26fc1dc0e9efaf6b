# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from enum import StrEnum


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log format '{raw}'") from exc


class LogComponent(StrEnum):
    CLI = "cli"
    CONTEXT = "context"
    BUNDLE = "bundle"
    SORBET = "sorbet"
    PROCESS = "process"
    SETTINGS = "settings"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log component '{raw}'") from exc


class DataFormat(StrEnum):
    JSON = "json"
    TEXT = "text"

    @classmethod
    def from_str(cls, raw: str) -> DataFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown data format '{raw}'") from exc


class Strictness(StrEnum):
    """Strictness levels accepted in a ``# typed:`` sigil."""

    IGNORE = "ignore"
    FALSE = "false"
    TRUE = "true"
    STRICT = "strict"
    STRONG = "strong"
    STDLIB_INTERNAL = "__STDLIB_INTERNAL"

    @classmethod
    def from_str(cls, raw: str) -> Strictness:
        value = raw.strip()
        try:
            return cls(value)
        except ValueError as exc:
            raise ValueError(f"Unknown strictness '{raw}'") from exc


class CheckerOutcomeKind(StrEnum):
    SUCCESS = "success"
    KILLED = "killed"
    SEGFAULT = "segfault"
