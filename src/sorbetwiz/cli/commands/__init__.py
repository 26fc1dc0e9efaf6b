# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Command implementations for the sorbetwiz CLI."""

from __future__ import annotations

from . import bundle, sorbet

__all__ = ["bundle", "sorbet"]
