# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from sorbetwiz.git import Commit

pytestmark = pytest.mark.unit


def test_parse_line() -> None:
    commit = Commit.parse_line("abc123 1700000000")
    assert commit == Commit(sha="abc123", timestamp=1700000000)
    assert commit is not None
    assert commit.time == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


def test_parse_line_strips_whitespace() -> None:
    assert Commit.parse_line("  abc123   1700000000\n") == Commit(sha="abc123", timestamp=1700000000)


@pytest.mark.parametrize("line", ["", "abc123", "abc123 yesterday", "abc123 17000 00"])
def test_parse_line_rejects_malformed_lines(line: str) -> None:
    assert Commit.parse_line(line) is None
