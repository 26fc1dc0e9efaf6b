# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Bundler support for a project context."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

from sorbetwiz._internal.logging_utils import structured_extra
from sorbetwiz.core.model_types import LogComponent

if TYPE_CHECKING:
    from sorbetwiz.core.types import ExecResult

    from .base import ContextPrimitives

logger: logging.Logger = logging.getLogger("sorbetwiz.context.bundle")

BUNDLE_BIN: Final[str] = "bundle"
GEMFILE: Final[str] = "Gemfile"
GEMFILE_LOCK: Final[str] = "Gemfile.lock"


def _gem_line_pattern(gem: str) -> re.Pattern[str]:
    # Lock file gem entries: four spaces, gem name, space, "(<version descriptor>)".
    return re.compile(rf"^    {re.escape(gem)} \(.*?(\d+\.\d+\.\d+).*\)", re.MULTILINE)


class BundleHelper:
    """Run Bundler and read its files inside a context directory."""

    def __init__(self, context: ContextPrimitives) -> None:
        self._context = context

    def read_gemfile(self) -> str | None:
        """Return the contents of the Gemfile, or ``None`` when there is none."""
        if not self._context.file(GEMFILE):
            return None
        return self._context.read(GEMFILE)

    def write_gemfile(self, contents: str, *, append: bool = False) -> None:
        self._context.write(GEMFILE, contents, append=append)

    def run(self, command: str, *, version: str | None = None, capture_err: bool = True) -> ExecResult:
        """Run ``bundle <command>``, pinning Bundler to ``version`` when given."""
        if version:
            command = f"_{version}_ {command}"
        full_command = f"{BUNDLE_BIN} {command}"
        logger.debug(
            "Running bundler: %s",
            full_command,
            extra=structured_extra(LogComponent.BUNDLE, tool=BUNDLE_BIN, command=full_command),
        )
        return self._context.exec(full_command, capture_err=capture_err)

    def install(self, *, version: str | None = None, capture_err: bool = True) -> ExecResult:
        return self.run("install", version=version, capture_err=capture_err)

    def exec(self, command: str, *, version: str | None = None, capture_err: bool = True) -> ExecResult:
        """Run ``bundle exec <command>``."""
        return self.run(f"exec {command}", version=version, capture_err=capture_err)

    def gem_version_from_gemfile_lock(self, gem: str) -> str | None:
        """Return the locked version of ``gem`` from ``Gemfile.lock``.

        Returns ``None`` when there is no lock file or ``gem`` is not listed.
        Only the first matching line is considered.
        """
        if not self._context.file(GEMFILE_LOCK):
            return None
        match = _gem_line_pattern(gem).search(self._context.read(GEMFILE_LOCK))
        if not match:
            return None
        return match.group(1)


__all__ = ["BUNDLE_BIN", "GEMFILE", "GEMFILE_LOCK", "BundleHelper"]
