# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sorbetwiz.context import Context  # noqa: E402
from sorbetwiz.core.types import ExecResult  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line(
        "markers",
        "integration: Integration tests (slower, spawn real processes)",
    )
    config.addinivalue_line("markers", "property: Property-based tests (Hypothesis)")


def exec_result(out: str = "", *, err: str | None = "", exit_code: int = 0) -> ExecResult:
    """Build an ``ExecResult`` the way a finished process would report it."""
    return ExecResult(out=out, err=err, status=exit_code == 0, exit_code=exit_code)


@dataclass
class ExecRecorder:
    """Stand-in for ``Context.exec`` that records commands and replays results."""

    results: list[ExecResult] = field(default_factory=list)
    commands: list[str] = field(default_factory=list)
    capture_flags: list[bool] = field(default_factory=list)
    side_effect: Callable[[str], None] | None = None

    def __call__(self, command: str, *, capture_err: bool = True) -> ExecResult:
        self.commands.append(command)
        self.capture_flags.append(capture_err)
        if self.side_effect is not None:
            self.side_effect(command)
        if self.results:
            return self.results.pop(0)
        return exec_result()

    @property
    def last(self) -> str:
        return self.commands[-1]


@pytest.fixture
def context(tmp_path: Path) -> Context:
    """A context rooted in an empty temporary project directory."""
    return Context(tmp_path / "project")


@pytest.fixture
def recorder(context: Context, monkeypatch: pytest.MonkeyPatch) -> ExecRecorder:
    """Replace ``exec`` on ``context`` so no external tool is spawned."""
    rec = ExecRecorder()
    monkeypatch.setattr(context, "exec", rec)
    return rec


@pytest.fixture
def make_result() -> Callable[..., ExecResult]:
    return exec_result
