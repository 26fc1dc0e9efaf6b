# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Structured utility helpers used across sorbetwiz internals."""

from __future__ import annotations

from .common import consume
from .process import (
    COMMAND_NOT_FOUND_CODE,
    SHELL_USAGE_CODE,
    SIGNAL_EXIT_OFFSET,
    normalise_exit_code,
    run_command,
    split_command,
)

__all__ = [
    "COMMAND_NOT_FOUND_CODE",
    "SHELL_USAGE_CODE",
    "SIGNAL_EXIT_OFFSET",
    "consume",
    "normalise_exit_code",
    "run_command",
    "split_command",
]
