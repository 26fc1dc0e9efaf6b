# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Shared CLI type definitions."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import argparse

    from sorbetwiz.context import Context
    from sorbetwiz.settings import Settings

__all__ = ["CommandHandler", "SubparserCollection"]

type CommandHandler = Callable[[argparse.Namespace, Context, Settings], int]


class SubparserCollection(Protocol):
    """Protocol describing the subset of ``argparse._SubParsersAction`` we rely on."""

    def add_parser(
        self,
        name: str,
        **kwargs: Any,  # noqa: ANN401  # JUSTIFIED: Protocol needs Any for kwargs to match argparse's _SubParsersAction signature with contravariance
    ) -> argparse.ArgumentParser:
        """Add a subparser to the collection.

        Args:
            name: Name of the subcommand.
            **kwargs: Keyword arguments forwarded to ArgumentParser (help, formatter_class, etc.).

        Returns:
            The created ArgumentParser for the subcommand.
        """
        ...  # pragma: no cover - Protocol definition
