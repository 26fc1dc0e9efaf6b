# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Core enums and value types shared across sorbetwiz."""

from __future__ import annotations

from .model_types import CheckerOutcomeKind, DataFormat, LogComponent, LogFormat, Strictness
from .types import ExecResult

__all__ = [
    "CheckerOutcomeKind",
    "DataFormat",
    "ExecResult",
    "LogComponent",
    "LogFormat",
    "Strictness",
]
