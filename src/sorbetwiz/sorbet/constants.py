# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from typing import Final

CONFIG_PATH: Final[str] = "sorbet/config"
DEFAULT_BIN: Final[str] = "srb"
TYPECHECK_SUBCOMMAND: Final[str] = "tc"
METRICS_FILE: Final[str] = "metrics.tmp"
DEFAULT_ALLOWED_EXTENSIONS: Final[tuple[str, ...]] = (".rb", ".rbi")

# Exit codes reported by the `srb` wrapper script when the checker process dies.
KILLED_CODE: Final[int] = 137
SEGFAULT_CODE: Final[int] = 139

__all__ = [
    "CONFIG_PATH",
    "DEFAULT_ALLOWED_EXTENSIONS",
    "DEFAULT_BIN",
    "KILLED_CODE",
    "METRICS_FILE",
    "SEGFAULT_CODE",
    "TYPECHECK_SUBCOMMAND",
]
