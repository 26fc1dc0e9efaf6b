# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.
"""Rendering helpers for CLI output."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import cast

from sorbetwiz.core.model_types import DataFormat
from sorbetwiz.json import normalise_enums_for_json


def _stringify(value: object) -> str:
    if value is None:
        return "-"
    return str(value)


def render_data(data: object, fmt: DataFormat | str) -> list[str]:
    """Render Python data for CLI output.

    JSON output is a single pretty-printed document. Text output renders
    mappings as ``key: value`` lines and sequences one item per line.
    """
    fmt_value = fmt if isinstance(fmt, DataFormat) else DataFormat.from_str(fmt)
    if fmt_value is DataFormat.JSON:
        return [json.dumps(normalise_enums_for_json(data), indent=2, ensure_ascii=False)]
    if isinstance(data, Mapping):
        mapping_data = cast("Mapping[object, object]", data)
        return [f"{key}: {_stringify(value)}" for key, value in mapping_data.items()]
    if isinstance(data, Sequence) and not isinstance(data, str):
        return [_stringify(item) for item in cast("Sequence[object]", data)]
    return [_stringify(data)]


__all__ = ["render_data"]
