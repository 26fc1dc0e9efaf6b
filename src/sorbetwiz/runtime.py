# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public runtime helpers for sorbetwiz layers above `_internal`."""

from __future__ import annotations

from sorbetwiz._internal.utils import (
    COMMAND_NOT_FOUND_CODE,
    consume,
    normalise_exit_code,
    run_command,
    split_command,
)
from sorbetwiz.core.types import ExecResult

__all__ = [
    "COMMAND_NOT_FOUND_CODE",
    "ExecResult",
    "consume",
    "normalise_exit_code",
    "run_command",
    "split_command",
]
