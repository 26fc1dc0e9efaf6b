# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Subprocess helpers returning ``ExecResult`` values."""

from __future__ import annotations

import logging
import shlex
import subprocess  # noqa: S404  # JUSTIFIED: centralised wrapper for subprocess execution without a shell
import time
from typing import TYPE_CHECKING, Final

from sorbetwiz._internal.logging_utils import structured_extra
from sorbetwiz.core.model_types import LogComponent
from sorbetwiz.core.types import ExecResult

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger: logging.Logger = logging.getLogger("sorbetwiz.internal.process")

SHELL_USAGE_CODE: Final[int] = 2
COMMAND_NOT_FOUND_CODE: Final[int] = 127
SIGNAL_EXIT_OFFSET: Final[int] = 128

__all__ = [
    "COMMAND_NOT_FOUND_CODE",
    "SHELL_USAGE_CODE",
    "SIGNAL_EXIT_OFFSET",
    "normalise_exit_code",
    "run_command",
    "split_command",
]


def split_command(command: str) -> list[str]:
    """Split a command string into an argument vector using POSIX shell quoting rules."""
    return shlex.split(command)


def normalise_exit_code(returncode: int) -> int:
    """Map ``subprocess`` return codes onto shell-style exit codes.

    ``subprocess`` reports a child terminated by signal ``N`` as ``-N``; a shell
    reports the same termination as ``128 + N``. Callers compare against the
    shell convention.
    """
    if returncode < 0:
        return SIGNAL_EXIT_OFFSET - returncode
    return returncode


def run_command(
    args: Iterable[str],
    cwd: Path | None = None,
    *,
    capture_err: bool = True,
) -> ExecResult:
    """Run a subprocess without a shell and return its captured output.

    Args:
        args: Command line to execute. The first element is treated as the
            executable and must be a non-empty string.
        cwd: Optional working directory for the child process.
        capture_err: When ``False`` stderr is inherited from the parent process
            and ``ExecResult.err`` is ``None``.

    Returns:
        ``ExecResult`` with captured stdout/stderr, success flag and exit code.
        A missing executable yields exit code ``127`` with the OS error as
        ``err``, mirroring what a shell reports.

    Raises:
        ValueError: If ``args`` is empty or the executable is an empty string.
    """
    argv = list(args)
    if not argv or not argv[0]:
        message = "run_command requires a non-empty executable"
        raise ValueError(message)
    executable = argv[0]
    display = shlex.join(argv)
    debug_details: dict[str, object] = {"capture_err": capture_err}
    if cwd:
        debug_details["cwd"] = str(cwd)
    logger.debug(
        "Executing command: %s",
        display,
        extra=structured_extra(LogComponent.PROCESS, command=display, details=debug_details),
    )
    start = time.perf_counter()
    try:
        completed = subprocess.run(  # noqa: S603 - command arguments provided by caller
            argv,
            check=False,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE if capture_err else None,
            text=True,
        )
    except FileNotFoundError as exc:
        logger.warning(
            "Command not found: %s",
            executable,
            extra=structured_extra(
                LogComponent.PROCESS,
                command=display,
                exit_code=COMMAND_NOT_FOUND_CODE,
            ),
        )
        return ExecResult(out="", err=str(exc), status=False, exit_code=COMMAND_NOT_FOUND_CODE)
    duration_ms = (time.perf_counter() - start) * 1000
    exit_code = normalise_exit_code(completed.returncode)
    if exit_code != 0:
        logger.warning(
            "Command failed (exit=%s): %s",
            exit_code,
            display,
            extra=structured_extra(
                LogComponent.PROCESS,
                command=display,
                exit_code=exit_code,
                duration_ms=duration_ms,
            ),
        )
    return ExecResult(
        out=completed.stdout or "",
        err=completed.stderr if capture_err else None,
        status=exit_code == 0,
        exit_code=exit_code,
    )
