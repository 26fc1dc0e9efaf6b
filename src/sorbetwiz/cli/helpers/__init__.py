# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared helpers for CLI commands."""

from __future__ import annotations

from .args import register_argument, register_format_argument, register_sorbet_arguments
from .formatting import render_data
from .io import echo

__all__ = [
    "echo",
    "register_argument",
    "register_format_argument",
    "register_sorbet_arguments",
    "render_data",
]
