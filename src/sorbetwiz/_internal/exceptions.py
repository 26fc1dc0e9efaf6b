# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Common exception hierarchy for sorbetwiz."""

from __future__ import annotations

__all__ = ["SorbetwizError", "SorbetwizTypeError", "SorbetwizValidationError"]


class SorbetwizError(Exception):
    """Base error for all sorbetwiz exceptions."""


class SorbetwizValidationError(SorbetwizError, ValueError):
    """Raised when input data fails validation checks."""


class SorbetwizTypeError(SorbetwizError, TypeError):
    """Raised when input data has an unexpected type."""
