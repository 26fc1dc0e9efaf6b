# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for sigil helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sorbetwiz.core.model_types import Strictness
from sorbetwiz.sorbet import sigils

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("# typed: true\n", "true"),
        ("#typed:strict\n", "strict"),
        ("# frozen_string_literal: true\n#   typed:\tfalse\n", "false"),
        ("# typed: __STDLIB_INTERNAL\n", "__STDLIB_INTERNAL"),
        ("# typed: nonsense\n", "nonsense"),
        ("class A; end\n", None),
        ("x = 1 # typed: true\n", None),
    ],
)
def test_strictness_in_content(content: str, expected: str | None) -> None:
    assert sigils.strictness_in_content(content) == expected


def test_valid_strictness() -> None:
    assert all(sigils.valid_strictness(level.value) for level in Strictness)
    assert not sigils.valid_strictness("nonsense")


def test_update_sigil_replaces_first_sigil_only() -> None:
    content = "# typed: false\nclass A; end\n# typed: false\n"
    assert sigils.update_sigil(content, Strictness.STRICT) == "# typed: strict\nclass A; end\n# typed: false\n"


def test_file_strictness(tmp_path: Path) -> None:
    path = tmp_path / "a.rb"
    assert sigils.file_strictness(path) is None
    _ = path.write_text("# typed: strong\n", encoding="utf-8")
    assert sigils.file_strictness(path) == "strong"
    assert sigils.file_strictness(tmp_path) is None


def test_change_sigil_in_files(tmp_path: Path) -> None:
    first = tmp_path / "a.rb"
    second = tmp_path / "b.rb"
    _ = first.write_text("# typed: false\n", encoding="utf-8")
    _ = second.write_text("class B; end\n", encoding="utf-8")

    changed = sigils.change_sigil_in_files([first, second], "true")

    assert changed == [first]
    assert sigils.file_strictness(first) == "true"
    assert second.read_text(encoding="utf-8") == "class B; end\n"
