# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Bundler commands for the sorbetwiz CLI."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from sorbetwiz.cli.helpers import echo, register_argument

if TYPE_CHECKING:
    from sorbetwiz.cli.types import SubparserCollection
    from sorbetwiz.context import Context
    from sorbetwiz.settings import Settings


def register_bundle_commands(subparsers: SubparserCollection) -> None:
    """Attach the ``gem-version`` and ``install`` commands to the CLI."""
    gem_version = subparsers.add_parser(
        "gem-version",
        help="Print the version of a gem locked in Gemfile.lock",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(gem_version, "gem", help="Gem name.")

    install = subparsers.add_parser(
        "install",
        help="Run `bundle install` in the project",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        install,
        "--bundler-version",
        default=None,
        help="Bundler version to run (overrides settings).",
    )


def execute_gem_version(args: argparse.Namespace, context: Context, settings: Settings) -> int:
    _ = settings
    version = context.bundle.gem_version_from_gemfile_lock(args.gem)
    if version is None:
        echo(f"[sorbetwiz] {args.gem} not found in Gemfile.lock", err=True)
        return 1
    echo(version)
    return 0


def execute_install(args: argparse.Namespace, context: Context, settings: Settings) -> int:
    res = context.bundle.install(
        version=args.bundler_version or settings.bundler_version,
        capture_err=settings.capture_err,
    )
    if res.out:
        echo(res.out, newline=False)
    if res.err:
        echo(res.err, newline=False, err=True)
    return res.exit_code


__all__ = ["execute_gem_version", "execute_install", "register_bundle_commands"]
