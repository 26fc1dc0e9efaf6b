# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for the Sorbet metrics parser."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from sorbetwiz.sorbet.metrics import MetricsParseError, MetricsParser

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit

PAYLOAD = {
    "repo": "",
    "sha": "",
    "status": "",
    "branch": "",
    "timestamp": "1700000000",
    "uuid": "",
    "metrics": [
        {"name": "ruby_typer.unknown..types.input.files", "value": 10},
        {"name": "ruby_typer.unknown..types.input.methods.total", "value": 42},
        {"name": "ruby_typer.unknown..types.sig.count"},
        {"name": "custom.metric", "value": 1},
    ],
}


def test_parse_string_strips_prefix_and_defaults_values() -> None:
    metrics = MetricsParser.parse_string(json.dumps(PAYLOAD))
    assert metrics == {
        ".types.input.files": 10,
        ".types.input.methods.total": 42,
        ".types.sig.count": 0,
        "custom.metric": 1,
    }


def test_parse_string_with_custom_prefix() -> None:
    metrics = MetricsParser.parse_string(json.dumps(PAYLOAD), prefix="custom.")
    assert metrics["metric"] == 1
    assert "ruby_typer.unknown..types.input.files" in metrics


def test_parse_file(tmp_path: Path) -> None:
    path = tmp_path / "metrics.json"
    _ = path.write_text(json.dumps(PAYLOAD), encoding="utf-8")
    assert MetricsParser.parse_file(path)[".types.input.files"] == 10


@pytest.mark.parametrize("raw", ["", "not json", "[]", '{"repo": "x"}'])
def test_parse_string_rejects_malformed_payloads(raw: str) -> None:
    with pytest.raises(MetricsParseError):
        _ = MetricsParser.parse_string(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(3.0, 3), (2.5, 2.5), ("7", 7), ("seven", 0), (True, 0), (None, 0)],
)
def test_parse_mapping_coerces_metric_values(raw: object, expected: float) -> None:
    payload = {"metrics": [{"name": "ruby_typer.unknown.count", "value": raw}]}
    metrics = MetricsParser.parse_mapping(payload)
    assert metrics == {"count": expected}
    assert type(metrics["count"]) is type(expected)


def test_parse_mapping_skips_unnamed_entries() -> None:
    payload = {"metrics": [{"value": 3}, "junk", {"name": "", "value": 1}, {"name": "ok", "value": 2}]}
    assert MetricsParser.parse_mapping(payload) == {"ok": 2}
