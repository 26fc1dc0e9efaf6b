# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Sorbet-specific constants, errors and file-format parsers."""

from __future__ import annotations

from . import sigils
from .config import SorbetConfig
from .constants import (
    CONFIG_PATH,
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_BIN,
    KILLED_CODE,
    METRICS_FILE,
    SEGFAULT_CODE,
)
from .errors import CheckerOutcome, Killed, Segfault, SorbetError
from .metrics import Metrics, MetricsParseError, MetricsParser

__all__ = [
    "CONFIG_PATH",
    "DEFAULT_ALLOWED_EXTENSIONS",
    "DEFAULT_BIN",
    "KILLED_CODE",
    "METRICS_FILE",
    "SEGFAULT_CODE",
    "CheckerOutcome",
    "Killed",
    "Metrics",
    "MetricsParseError",
    "MetricsParser",
    "Segfault",
    "SorbetConfig",
    "SorbetError",
    "sigils",
]
