# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Parser for the metrics file Sorbet writes with ``--metrics-file``.

The file is a JSON document shaped like::

    {"metrics": [{"name": "ruby_typer.unknown..types.input.files", "value": 12}]}

Metric names carry a ``ruby_typer.unknown.`` prefix that is stripped so callers
work with names such as ``.types.input.files``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Final, cast

from sorbetwiz._internal.exceptions import SorbetwizValidationError

DEFAULT_PREFIX: Final[str] = "ruby_typer.unknown."

type Metrics = dict[str, int | float]


class MetricsParseError(SorbetwizValidationError):
    """Raised when a metrics payload is not valid Sorbet metrics JSON."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid Sorbet metrics in {source}: {reason}")


def _metric_value(raw: object) -> int | float:
    # Missing or non-numeric values count as zero; whole floats collapse to int.
    match raw:
        case bool():
            return 0
        case int():
            return raw
        case float():
            return int(raw) if raw.is_integer() else raw
        case str():
            try:
                return int(raw)
            except ValueError:
                return 0
        case _:
            return 0


class MetricsParser:
    """Namespace of parsing entry points for Sorbet metrics files."""

    @classmethod
    def parse_file(cls, path: Path | str, prefix: str = DEFAULT_PREFIX) -> Metrics:
        text = Path(path).read_text(encoding="utf-8")
        return cls.parse_string(text, prefix, source=str(path))

    @classmethod
    def parse_string(cls, string: str, prefix: str = DEFAULT_PREFIX, *, source: str = "<string>") -> Metrics:
        if not string.strip():
            raise MetricsParseError(source, "empty payload")
        try:
            payload: object = json.loads(string)
        except json.JSONDecodeError as exc:
            raise MetricsParseError(source, str(exc)) from exc
        if not isinstance(payload, dict):
            raise MetricsParseError(source, f"expected a JSON object, got {type(payload).__name__}")
        return cls.parse_mapping(cast("Mapping[str, object]", payload), prefix, source=source)

    @classmethod
    def parse_mapping(
        cls,
        payload: Mapping[str, object],
        prefix: str = DEFAULT_PREFIX,
        *,
        source: str = "<mapping>",
    ) -> Metrics:
        raw_metrics = payload.get("metrics")
        if not isinstance(raw_metrics, list):
            raise MetricsParseError(source, "missing 'metrics' list")
        metrics: Metrics = {}
        for item in cast("list[object]", raw_metrics):
            if not isinstance(item, dict):
                continue
            entry = cast("dict[str, object]", item)
            name = entry.get("name")
            if not isinstance(name, str) or not name:
                continue
            metrics[name.removeprefix(prefix)] = _metric_value(entry.get("value"))
        return metrics


__all__ = ["DEFAULT_PREFIX", "Metrics", "MetricsParseError", "MetricsParser"]
