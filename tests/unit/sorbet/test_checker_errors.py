# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for abnormal Sorbet termination handling."""

from __future__ import annotations

import pytest

from sorbetwiz.core.model_types import CheckerOutcomeKind
from sorbetwiz.core.types import ExecResult
from sorbetwiz.exceptions import SorbetwizError
from sorbetwiz.sorbet.constants import KILLED_CODE, SEGFAULT_CODE
from sorbetwiz.sorbet.errors import CheckerOutcome, Killed, Segfault, SorbetError

pytestmark = pytest.mark.unit


def _result(exit_code: int) -> ExecResult:
    return ExecResult(out="out", err="err", status=exit_code == 0, exit_code=exit_code)


def test_classify_completed_runs() -> None:
    for code in (0, 1, 100):
        outcome = CheckerOutcome.classify(_result(code))
        assert outcome.kind is CheckerOutcomeKind.SUCCESS
        assert outcome.completed
        assert outcome.unwrap() is outcome.result


def test_unwrap_killed_raises_with_result() -> None:
    res = _result(KILLED_CODE)
    outcome = CheckerOutcome.classify(res)
    assert outcome.kind is CheckerOutcomeKind.KILLED
    assert not outcome.completed
    with pytest.raises(Killed) as excinfo:
        _ = outcome.unwrap()
    assert excinfo.value.result is res


def test_unwrap_segfault_raises_with_result() -> None:
    res = _result(SEGFAULT_CODE)
    with pytest.raises(Segfault) as excinfo:
        _ = CheckerOutcome.classify(res).unwrap()
    assert excinfo.value.result.err == "err"


def test_error_hierarchy() -> None:
    assert issubclass(Killed, SorbetError)
    assert issubclass(Segfault, SorbetError)
    assert issubclass(SorbetError, SorbetwizError)
