# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

from pytest import CaptureFixture, fixture, mark, raises

from sorbetwiz._internal.logging_utils import LOG_LEVELS, JSONLogFormatter, configure_logging, structured_extra
from sorbetwiz.core.model_types import LogComponent, LogFormat

pytestmark = mark.unit


@fixture(autouse=True)
def _restore_logger() -> Generator[None, None, None]:
    logger = logging.getLogger("sorbetwiz")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_configure_logging_json_emits_structured_logs(capsys: CaptureFixture[str]) -> None:
    configure_logging(LogFormat.JSON)
    logger = logging.getLogger("sorbetwiz.context")
    logger.info(
        "hello",
        extra=structured_extra(
            LogComponent.SORBET,
            tool="srb",
            command="bundle exec srb tc",
            exit_code=0,
            path=Path("proj"),
            details={"outcome": "success"},
        ),
    )
    captured = capsys.readouterr()
    payload = json.loads(captured.err.strip().splitlines()[-1])
    assert payload["message"] == "hello"
    assert payload["logger"] == "sorbetwiz.context"
    assert payload["component"] == "sorbet"
    assert payload["tool"] == "srb"
    assert payload["command"] == "bundle exec srb tc"
    assert payload["exit_code"] == 0
    assert payload["path"] == "proj"
    assert payload["details"] == {"outcome": "success"}


def test_configure_logging_text_format(capsys: CaptureFixture[str]) -> None:
    configure_logging("text", log_level="warning")
    logger = logging.getLogger("sorbetwiz.cli")
    logger.info("hidden")
    logger.warning("shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.err
    assert "[WARNING] shown" in captured.err


def test_configure_logging_replaces_previous_handler() -> None:
    configure_logging("text")
    configure_logging("json", log_level="debug")
    root = logging.getLogger("sorbetwiz")
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONLogFormatter)
    assert root.level == logging.DEBUG
    assert root.propagate is False


def test_configure_logging_rejects_unknown_format() -> None:
    with raises(ValueError):
        configure_logging("yaml")


def test_structured_extra_drops_empty_values() -> None:
    extra = structured_extra(LogComponent.BUNDLE, tool=None, details={})
    assert extra == {"component": LogComponent.BUNDLE}


def test_structured_extra_rounds_duration() -> None:
    extra = structured_extra(LogComponent.PROCESS, duration_ms=1.23456)
    assert extra["duration_ms"] == 1.235


def test_log_levels_constant() -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
