# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Public accessors for sorbetwiz error code metadata."""

from __future__ import annotations

from sorbetwiz._internal.error_codes import error_code_catalog, error_code_for

__all__ = ["error_code_catalog", "error_code_for"]
