# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public exception types re-exported from the internal package."""

from __future__ import annotations

from sorbetwiz._internal.exceptions import SorbetwizError, SorbetwizTypeError, SorbetwizValidationError

__all__ = ["SorbetwizError", "SorbetwizTypeError", "SorbetwizValidationError"]
