# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Sorbet commands for the sorbetwiz CLI."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from sorbetwiz.cli.helpers import (
    echo,
    register_argument,
    register_format_argument,
    register_sorbet_arguments,
    render_data,
)

if TYPE_CHECKING:
    from sorbetwiz.cli.types import SubparserCollection
    from sorbetwiz.context import Context
    from sorbetwiz.settings import Settings


def register_sorbet_commands(subparsers: SubparserCollection) -> None:
    """Attach the Sorbet commands (``files``, ``tc``, ``metrics``, ...) to the CLI."""
    files = subparsers.add_parser(
        "files",
        help="List the files Sorbet type checks",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_format_argument(files)

    tc = subparsers.add_parser(
        "tc",
        help="Run `srb tc` in the project",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_sorbet_arguments(tc)

    metrics = subparsers.add_parser(
        "metrics",
        help="Type check and print the metrics Sorbet collected",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_format_argument(metrics)
    register_sorbet_arguments(metrics)

    version = subparsers.add_parser(
        "version",
        help="Print the Sorbet version used by the project",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_sorbet_arguments(version)

    strictness = subparsers.add_parser(
        "strictness",
        help="Print the strictness sigil of a file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(strictness, "file", help="Path relative to the project root.")

    commits = subparsers.add_parser(
        "commits",
        help="Show the commits that added and removed sorbet/config",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_format_argument(commits)


def _sorbet_bin(args: argparse.Namespace, settings: Settings) -> str | None:
    return getattr(args, "sorbet_bin", None) or settings.sorbet_bin


def _sorbet_args(args: argparse.Namespace) -> list[str]:
    return [arg for arg in getattr(args, "sorbet_args", None) or [] if arg != "--"]


def execute_files(args: argparse.Namespace, context: Context, settings: Settings) -> int:
    _ = settings
    if not context.sorbet.has_config():
        echo(f"[sorbetwiz] No sorbet/config found in {context.absolute_path}", err=True)
        return 1
    for line in render_data(context.sorbet.srb_files(), args.format):
        echo(line)
    return 0


def execute_tc(args: argparse.Namespace, context: Context, settings: Settings) -> int:
    res = context.sorbet.srb_tc(
        *_sorbet_args(args),
        sorbet_bin=_sorbet_bin(args, settings),
        capture_err=settings.capture_err,
    )
    if res.out:
        echo(res.out, newline=False)
    if res.err:
        echo(res.err, newline=False, err=True)
    return res.exit_code


def execute_metrics(args: argparse.Namespace, context: Context, settings: Settings) -> int:
    metrics = context.sorbet.srb_metrics(
        *_sorbet_args(args),
        sorbet_bin=_sorbet_bin(args, settings),
        capture_err=settings.capture_err,
    )
    if metrics is None:
        echo("[sorbetwiz] Sorbet did not produce a metrics file", err=True)
        return 1
    for line in render_data(dict(sorted(metrics.items())), args.format):
        echo(line)
    return 0


def execute_version(args: argparse.Namespace, context: Context, settings: Settings) -> int:
    version = context.sorbet.srb_version(
        *_sorbet_args(args),
        sorbet_bin=_sorbet_bin(args, settings),
        capture_err=settings.capture_err,
    )
    if version is None:
        echo("[sorbetwiz] Unable to determine the Sorbet version", err=True)
        return 1
    echo(version)
    return 0


def execute_strictness(args: argparse.Namespace, context: Context, settings: Settings) -> int:
    _ = settings
    strictness = context.sorbet.read_file_strictness(args.file)
    if strictness is None:
        echo(f"[sorbetwiz] No sigil found in {args.file}", err=True)
        return 1
    echo(strictness)
    return 0


def execute_commits(args: argparse.Namespace, context: Context, settings: Settings) -> int:
    _ = settings
    payload: dict[str, dict[str, object] | None] = {}
    for label, commit in (
        ("intro", context.sorbet.intro_commit()),
        ("removal", context.sorbet.removal_commit()),
    ):
        payload[label] = (
            None if commit is None else {"sha": commit.sha, "timestamp": commit.timestamp, "time": commit.time.isoformat()}
        )
    if args.format == "json":
        for line in render_data(payload, args.format):
            echo(line)
        return 0
    for label, entry in payload.items():
        echo(f"{label}: -" if entry is None else f"{label}: {entry['sha']} ({entry['time']})")
    return 0


__all__ = [
    "execute_commits",
    "execute_files",
    "execute_metrics",
    "execute_strictness",
    "execute_tc",
    "execute_version",
    "register_sorbet_commands",
]
