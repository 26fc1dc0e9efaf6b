# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Errors and in-band outcomes for abnormal Sorbet terminations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sorbetwiz._internal.exceptions import SorbetwizError
from sorbetwiz.core.model_types import CheckerOutcomeKind

from .constants import KILLED_CODE, SEGFAULT_CODE

if TYPE_CHECKING:
    from sorbetwiz.core.types import ExecResult


class SorbetError(SorbetwizError):
    """Raised when the Sorbet process terminates abnormally.

    The captured ``ExecResult`` stays available on ``result`` so callers can
    still inspect stdout/stderr after the failure.
    """

    def __init__(self, message: str, result: ExecResult) -> None:
        self.message = message
        self.result = result
        super().__init__(message)


class Killed(SorbetError):
    """Raised when Sorbet was killed (for example by the OOM killer)."""


class Segfault(SorbetError):
    """Raised when Sorbet crashed with a segmentation fault."""


@dataclass(slots=True, frozen=True)
class CheckerOutcome:
    """Tagged result of one Sorbet invocation.

    ``kind`` tells whether the process completed (successfully or not) or died;
    ``result`` is the captured ``ExecResult`` in every case.
    """

    kind: CheckerOutcomeKind
    result: ExecResult

    @classmethod
    def classify(cls, result: ExecResult) -> CheckerOutcome:
        match result.exit_code:
            case code if code == KILLED_CODE:
                kind = CheckerOutcomeKind.KILLED
            case code if code == SEGFAULT_CODE:
                kind = CheckerOutcomeKind.SEGFAULT
            case _:
                kind = CheckerOutcomeKind.SUCCESS
        return cls(kind=kind, result=result)

    @property
    def completed(self) -> bool:
        return self.kind is CheckerOutcomeKind.SUCCESS

    def unwrap(self) -> ExecResult:
        """Return the captured result, raising ``Killed``/``Segfault`` for abnormal terminations."""
        match self.kind:
            case CheckerOutcomeKind.KILLED:
                raise Killed("Sorbet was killed.", self.result)
            case CheckerOutcomeKind.SEGFAULT:
                raise Segfault("Sorbet segfaulted.", self.result)
            case _:
                return self.result


__all__ = ["CheckerOutcome", "Killed", "Segfault", "SorbetError"]
