# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Value types produced by subprocess execution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ExecResult:
    """Captured outcome of one subprocess invocation.

    Attributes:
        out: Captured standard output.
        err: Captured standard error, or ``None`` when stderr was left attached
            to the parent process.
        status: ``True`` when the process exited successfully.
        exit_code: Raw exit code. Signal terminations are reported as
            ``128 + signal`` the way a POSIX shell reports them.
    """

    out: str
    err: str | None
    status: bool
    exit_code: int

    def __str__(self) -> str:
        return "\n".join((
            "########## STDOUT ##########",
            self.out,
            "########## STDERR ##########",
            self.err or "",
            f"########## STATUS: {self.status} ##########",
        ))


__all__ = ["ExecResult"]
