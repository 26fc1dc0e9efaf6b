# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Git value types parsed from ``git log`` output."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(slots=True, frozen=True)
class Commit:
    """A commit identified by its short hash and author timestamp.

    Attributes:
        sha: Abbreviated commit hash (``%h``).
        timestamp: Author date as a unix epoch (``%at``).
    """

    sha: str
    timestamp: int

    @classmethod
    def parse_line(cls, line: str) -> Commit | None:
        """Parse a ``"<short-hash> <unix-timestamp>"`` line.

        Returns ``None`` when the line does not hold both fields or the
        timestamp is not an integer.
        """
        parts = line.strip().split(maxsplit=1)
        if len(parts) != 2:  # noqa: PLR2004
            return None
        sha, epoch = parts
        try:
            timestamp = int(epoch.strip())
        except ValueError:
            return None
        return cls(sha=sha, timestamp=timestamp)

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)


__all__ = ["Commit"]
