# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""sorbetwiz - Bundler and Sorbet helpers for Ruby project directories.

Provides a ``Context`` that wraps a project directory and helpers that run
``bundle`` and ``srb`` inside it, read their configuration and lock files,
and parse the metrics, sigils and git history Sorbet workflows rely on.
"""

from __future__ import annotations

from sorbetwiz._internal.exceptions import (
    SorbetwizError,
    SorbetwizTypeError,
    SorbetwizValidationError,
)

from .context import BundleHelper, Context, ContextPrimitives, SorbetHelper
from .core.types import ExecResult
from .git import Commit
from .settings import Settings, load_settings
from .sorbet import (
    CheckerOutcome,
    Killed,
    MetricsParser,
    Segfault,
    SorbetConfig,
    SorbetError,
)

__all__ = [
    "__version__",
    "BundleHelper",
    "CheckerOutcome",
    "Commit",
    "Context",
    "ContextPrimitives",
    "ExecResult",
    "Killed",
    "MetricsParser",
    "Segfault",
    "Settings",
    "SorbetConfig",
    "SorbetError",
    "SorbetHelper",
    "SorbetwizError",
    "SorbetwizTypeError",
    "SorbetwizValidationError",
    "load_settings",
]

__version__ = "0.1.0"
