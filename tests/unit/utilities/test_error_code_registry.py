# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import re

import pytest

from sorbetwiz.core.types import ExecResult
from sorbetwiz.error_codes import error_code_catalog, error_code_for
from sorbetwiz.exceptions import SorbetwizError, SorbetwizTypeError, SorbetwizValidationError
from sorbetwiz.settings import SettingsError
from sorbetwiz.sorbet.errors import Killed, Segfault
from sorbetwiz.sorbet.metrics import MetricsParseError

pytestmark = pytest.mark.unit


def test_error_code_for_known_hierarchy() -> None:
    res = ExecResult(out="", err=None, status=False, exit_code=137)
    assert error_code_for(SorbetwizError("x")) == "SW000"
    assert error_code_for(SorbetwizValidationError("x")) == "SW100"
    assert error_code_for(SorbetwizTypeError("x")) == "SW101"
    assert error_code_for(SettingsError("x")) == "SW110"
    assert error_code_for(MetricsParseError("metrics.tmp", "bad")) == "SW120"
    assert error_code_for(Killed("Sorbet was killed.", res)) == "SW201"
    assert error_code_for(Segfault("Sorbet segfaulted.", res)) == "SW202"


def test_error_code_for_unknown_defaults_to_base() -> None:
    class CustomError(RuntimeError):
        pass

    assert error_code_for(CustomError("x")) == "SW000"


def test_error_code_catalog_uniqueness() -> None:
    catalog = error_code_catalog()
    codes = list(catalog.values())
    assert len(codes) == len(set(codes))
    assert all(re.fullmatch(r"SW\d{3}", code) for code in codes)
    assert catalog["sorbetwiz.sorbet.errors.Killed"] == "SW201"
