# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""CLI entry point and orchestration for sorbetwiz commands."""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Sequence
from contextlib import suppress
from typing import TYPE_CHECKING, Final

from sorbetwiz import __version__
from sorbetwiz._internal.error_codes import error_code_for
from sorbetwiz._internal.exceptions import SorbetwizError
from sorbetwiz.cli.commands import bundle as bundle_command
from sorbetwiz.cli.commands import sorbet as sorbet_command
from sorbetwiz.cli.helpers import echo as _echo
from sorbetwiz.cli.helpers import register_argument as _register_argument
from sorbetwiz.context import Context
from sorbetwiz.core.model_types import LogFormat
from sorbetwiz.logging import LOG_FORMATS, LOG_LEVELS, configure_logging
from sorbetwiz.settings import load_settings

if TYPE_CHECKING:
    from sorbetwiz.cli.types import CommandHandler

logger: logging.Logger = logging.getLogger("sorbetwiz.cli")

SORBETWIZ_VERSION: Final[str] = __version__


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the sorbetwiz command-line interface.

    Parses command-line arguments, loads settings, configures logging, and
    dispatches to the command handler.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"sorbetwiz {SORBETWIZ_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        root = args.root.resolve()
        settings = load_settings(args.config, root=root)
        _initialize_logging(args.log_format or settings.log_format, args.log_level or settings.log_level)
        return handler(args, Context(root), settings)
    except SorbetwizError as exc:
        logger.debug("Command %s failed", args.command, exc_info=exc)
        _echo(f"[sorbetwiz] error {error_code_for(exc)}: {exc}", err=True)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sorbetwiz",
        description="Run Bundler and Sorbet against a Ruby project and inspect the results.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "--root",
        type=pathlib.Path,
        default=pathlib.Path(),
        help="Project directory to operate on.",
    )
    _register_argument(
        parser,
        "--config",
        type=pathlib.Path,
        default=None,
        help="Explicit sorbetwiz settings file (defaults to sorbetwiz.toml or [tool.sorbetwiz]).",
    )
    _register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Select logging output format (human-readable text or structured JSON).",
    )
    _register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Set verbosity of logged events.",
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the sorbetwiz version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    sorbet_command.register_sorbet_commands(subparsers)
    bundle_command.register_bundle_commands(subparsers)
    return parser


def _initialize_logging(log_format: str, log_level: str) -> None:
    """Configure logging; failures are suppressed (best-effort initialization)."""
    with suppress(ValueError):
        configure_logging(LogFormat.from_str(log_format), log_level=log_level)


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "commits": sorbet_command.execute_commits,
        "files": sorbet_command.execute_files,
        "gem-version": bundle_command.execute_gem_version,
        "install": bundle_command.execute_install,
        "metrics": sorbet_command.execute_metrics,
        "strictness": sorbet_command.execute_strictness,
        "tc": sorbet_command.execute_tc,
        "version": sorbet_command.execute_version,
    }


__all__ = ["main"]
