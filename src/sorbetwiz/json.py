# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""JSON conversion for structured log records and CLI output."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import cast

type JSONValue = str | int | float | bool | dict[str, JSONValue] | list[JSONValue] | None


def _json_key(key: object) -> str:
    return str(key.value) if isinstance(key, Enum) else str(key)


def normalise_enums_for_json(value: object) -> JSONValue:
    """Return ``value`` with enums replaced by their values, ready for ``json.dumps``.

    Mappings get string keys, tuples become lists, and anything else that JSON
    cannot represent is rendered with ``str``.
    """
    match value:
        case Enum():
            return cast("JSONValue", value.value)
        case None | bool() | int() | float() | str():
            return value
        case Mapping():
            items = cast("Mapping[object, object]", value).items()
            return {_json_key(key): normalise_enums_for_json(item) for key, item in items}
        case list() | tuple():
            return [normalise_enums_for_json(item) for item in cast("list[object] | tuple[object, ...]", value)]
        case _:
            return str(value)


__all__ = ["JSONValue", "normalise_enums_for_json"]
