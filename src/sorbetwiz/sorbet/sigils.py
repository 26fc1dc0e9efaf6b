# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Helpers for reading and rewriting ``# typed:`` sigils in Ruby files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from sorbetwiz._internal.logging_utils import structured_extra
from sorbetwiz.core.model_types import LogComponent, Strictness

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: logging.Logger = logging.getLogger("sorbetwiz.sorbet.sigils")

VALID_STRICTNESS: Final[frozenset[str]] = frozenset(level.value for level in Strictness)
SIGIL_REGEXP: Final[re.Pattern[str]] = re.compile(r"^#[ \t]*typed:[ \t]*(\S*)", re.MULTILINE)


def sigil_string(strictness: Strictness | str) -> str:
    """Return the sigil line for ``strictness``, e.g. ``# typed: true``."""
    return f"# typed: {strictness}"


def valid_strictness(strictness: str) -> bool:
    return strictness in VALID_STRICTNESS


def strictness_in_content(content: str) -> str | None:
    """Return the strictness declared by the first sigil in ``content``."""
    match = SIGIL_REGEXP.search(content)
    return match.group(1) if match else None


def update_sigil(content: str, new_strictness: Strictness | str) -> str:
    """Replace the first sigil in ``content`` with one for ``new_strictness``."""
    return SIGIL_REGEXP.sub(sigil_string(new_strictness), content, count=1)


def file_strictness(path: Path | str) -> str | None:
    """Return the strictness declared in the file at ``path``.

    Returns ``None`` when the file does not exist or declares no sigil.
    """
    file_path = Path(path)
    if not file_path.is_file():
        return None
    return strictness_in_content(file_path.read_text(encoding="utf-8", errors="replace"))


def change_sigil_in_file(path: Path | str, new_strictness: Strictness | str) -> bool:
    """Rewrite the sigil of the file at ``path``.

    Returns:
        ``True`` when the file now declares ``new_strictness``.
    """
    file_path = Path(path)
    content = file_path.read_text(encoding="utf-8")
    _ = file_path.write_text(update_sigil(content, new_strictness), encoding="utf-8")
    changed = strictness_in_content(file_path.read_text(encoding="utf-8")) == str(new_strictness)
    logger.debug(
        "Changed sigil of %s to %s",
        file_path,
        new_strictness,
        extra=structured_extra(LogComponent.SORBET, path=file_path, details={"changed": changed}),
    )
    return changed


def change_sigil_in_files(paths: Iterable[Path | str], new_strictness: Strictness | str) -> list[Path]:
    """Rewrite sigils in ``paths`` and return the files that were changed."""
    return [Path(path) for path in paths if change_sigil_in_file(path, new_strictness)]


__all__ = [
    "SIGIL_REGEXP",
    "VALID_STRICTNESS",
    "change_sigil_in_file",
    "change_sigil_in_files",
    "file_strictness",
    "sigil_string",
    "strictness_in_content",
    "update_sigil",
    "valid_strictness",
]
