# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from collections.abc import Mapping
from typing import NewType

from sorbetwiz._internal.exceptions import SorbetwizError, SorbetwizTypeError, SorbetwizValidationError
from sorbetwiz.settings import InvalidSettingsFileError, SettingsError, SettingsReadError
from sorbetwiz.sorbet.errors import Killed, Segfault, SorbetError
from sorbetwiz.sorbet.metrics import MetricsParseError

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    SorbetwizError: ErrorCode("SW000"),
    SorbetwizValidationError: ErrorCode("SW100"),
    SorbetwizTypeError: ErrorCode("SW101"),
    SettingsError: ErrorCode("SW110"),
    SettingsReadError: ErrorCode("SW111"),
    InvalidSettingsFileError: ErrorCode("SW112"),
    MetricsParseError: ErrorCode("SW120"),
    SorbetError: ErrorCode("SW200"),
    Killed: ErrorCode("SW201"),
    Segfault: ErrorCode("SW202"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured sorbetwiz exception."""

    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("SW000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Intended for diagnostics, tests, and documentation generation - avoids
    exposing the private mapping while keeping a single source of truth.
    """

    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
