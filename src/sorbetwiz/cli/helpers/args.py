# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.
"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

import argparse
from typing import Any, Protocol

from sorbetwiz.core.model_types import DataFormat
from sorbetwiz.runtime import consume


class ArgumentRegistrar(Protocol):
    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action: ...  # pragma: no cover - stub


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    consume(registrar.add_argument(*args, **kwargs))


def register_format_argument(registrar: ArgumentRegistrar) -> None:
    register_argument(
        registrar,
        "--format",
        choices=[fmt.value for fmt in DataFormat],
        default=DataFormat.TEXT.value,
        help="Output format.",
    )


def register_sorbet_arguments(registrar: ArgumentRegistrar) -> None:
    """Register the options shared by commands that run Sorbet."""
    register_argument(
        registrar,
        "--sorbet-bin",
        default=None,
        help="Run this Sorbet binary directly instead of `bundle exec srb`.",
    )
    register_argument(
        registrar,
        "sorbet_args",
        nargs=argparse.REMAINDER,
        help="Extra arguments passed to Sorbet.",
    )


__all__ = ["ArgumentRegistrar", "register_argument", "register_format_argument", "register_sorbet_arguments"]
