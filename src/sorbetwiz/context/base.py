# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Project directory context: filesystem, process and git primitives.

A ``Context`` wraps one directory on disk. Helpers that drive external tools
(``BundleHelper``, ``SorbetHelper``) only depend on the ``ContextPrimitives``
protocol and are attached to a context by composition.
"""

from __future__ import annotations

import glob as globlib
import logging
import shlex
import shutil
import tempfile
from pathlib import Path
from typing import Protocol

from sorbetwiz._internal.logging_utils import structured_extra
from sorbetwiz._internal.utils import SHELL_USAGE_CODE, run_command, split_command
from sorbetwiz.core.model_types import LogComponent
from sorbetwiz.core.types import ExecResult

from .bundle import BundleHelper
from .sorbet import SorbetHelper

logger: logging.Logger = logging.getLogger("sorbetwiz.context")


class ContextPrimitives(Protocol):
    """Capabilities the tool helpers need from a project directory."""

    @property
    def absolute_path(self) -> Path: ...

    def absolute_path_to(self, relative_path: str) -> Path: ...

    def glob(self, pattern: str = "**/*") -> list[str]: ...

    def file(self, relative_path: str) -> bool: ...

    def read(self, relative_path: str) -> str: ...

    def write(self, relative_path: str, contents: str = "", *, append: bool = False) -> None: ...

    def remove(self, relative_path: str) -> None: ...

    def exec(self, command: str, *, capture_err: bool = True) -> ExecResult: ...

    def git_log(self, *args: str) -> ExecResult: ...


class Context:
    """A project directory under analysis."""

    def __init__(self, absolute_path: Path | str) -> None:
        self._absolute_path = Path(absolute_path).expanduser().resolve()
        self.bundle = BundleHelper(self)
        self.sorbet = SorbetHelper(self, self.bundle)

    @classmethod
    def mktmp(cls, name: str | None = None) -> Context:
        """Create a context rooted in a fresh temporary directory."""
        return cls(tempfile.mkdtemp(prefix=name or "sorbetwiz-"))

    def __repr__(self) -> str:
        return f"Context({str(self._absolute_path)!r})"

    # Filesystem

    @property
    def absolute_path(self) -> Path:
        return self._absolute_path

    def absolute_path_to(self, relative_path: str) -> Path:
        return self._absolute_path / relative_path

    def exists(self) -> bool:
        return self._absolute_path.is_dir()

    def mkdir(self) -> None:
        """Create the context directory (and parents) if missing."""
        self._absolute_path.mkdir(parents=True, exist_ok=True)

    def glob(self, pattern: str = "**/*") -> list[str]:
        """Return relative POSIX paths matching ``pattern``, sorted.

        ``**`` matches recursively; hidden files and directories are not matched.
        """
        matches = globlib.glob(pattern, root_dir=self._absolute_path, recursive=True)
        return sorted(Path(match).as_posix() for match in matches)

    def entries(self) -> list[str]:
        """Return the names of the direct children of the context directory."""
        return self.glob("*")

    def file(self, relative_path: str) -> bool:
        return self.absolute_path_to(relative_path).is_file()

    def read(self, relative_path: str) -> str:
        """Return the text of ``relative_path``; raises ``FileNotFoundError`` when missing."""
        return self.absolute_path_to(relative_path).read_text(encoding="utf-8")

    def write(self, relative_path: str, contents: str = "", *, append: bool = False) -> None:
        """Write ``contents`` to ``relative_path``, creating parent directories."""
        path = self.absolute_path_to(relative_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a" if append else "w", encoding="utf-8") as handle:
            _ = handle.write(contents)

    def remove(self, relative_path: str) -> None:
        """Delete a file or directory tree; missing paths are ignored."""
        path = self.absolute_path_to(relative_path)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)

    def move(self, from_relative_path: str, to_relative_path: str) -> None:
        destination = self.absolute_path_to(to_relative_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        _ = shutil.move(self.absolute_path_to(from_relative_path), destination)

    def destroy(self) -> None:
        """Delete the context directory and everything in it."""
        shutil.rmtree(self._absolute_path, ignore_errors=True)

    # Processes

    def exec(self, command: str, *, capture_err: bool = True) -> ExecResult:
        """Run ``command`` inside the context directory.

        The command string is split with POSIX shell quoting rules and executed
        without a shell. A string that cannot be split (an unbalanced quote, say)
        or that names no program fails with exit code 2, as a shell would.
        """
        logger.debug(
            "Running in %s: %s",
            self._absolute_path,
            command,
            extra=structured_extra(LogComponent.CONTEXT, command=command, path=self._absolute_path),
        )
        try:
            argv = split_command(command)
        except ValueError as exc:
            return self._unrunnable(command, str(exc))
        if not argv or not argv[0]:
            return self._unrunnable(command, "no program to run")
        return run_command(argv, cwd=self._absolute_path, capture_err=capture_err)

    def _unrunnable(self, command: str, reason: str) -> ExecResult:
        logger.warning(
            "Cannot run %r: %s",
            command,
            reason,
            extra=structured_extra(LogComponent.CONTEXT, command=command, exit_code=SHELL_USAGE_CODE),
        )
        return ExecResult(out="", err=reason, status=False, exit_code=SHELL_USAGE_CODE)

    # Git

    def git(self, command: str) -> ExecResult:
        return self.exec(f"git {command}")

    def git_init(self, *, branch: str | None = None) -> ExecResult:
        if branch:
            return self.git(f"init -q -b {branch}")
        return self.git("init -q")

    def git_log(self, *args: str) -> ExecResult:
        return self.git(f"log {' '.join(args)}")

    def git_commit(self, message: str = "message", *, allow_empty: bool = False) -> ExecResult:
        _ = self.git("add --all")
        flags = " --allow-empty" if allow_empty else ""
        return self.git(f"-c commit.gpgsign=false commit -m {shlex.quote(message)}{flags}")

    def git_current_branch(self) -> str | None:
        res = self.git("branch --show-current")
        if not res.status:
            return None
        return res.out.strip() or None


__all__ = ["Context", "ContextPrimitives"]
