# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Unit tests for the ``sorbet/config`` parser."""

from __future__ import annotations

from textwrap import dedent

import pytest

from sorbetwiz.sorbet.config import SorbetConfig

pytestmark = pytest.mark.unit


def test_parse_empty_config() -> None:
    config = SorbetConfig.parse_string("")
    assert config == SorbetConfig()
    assert config.effective_extensions == [".rb", ".rbi"]


def test_parse_paths_and_options() -> None:
    config = SorbetConfig.parse_string(
        dedent(
            """\
            # comment
            .
            --dir=lib

            --dir
            app
            --ignore=vendor/
            --ignore
            tmp/
            --allowed-extension=.rb
            --allowed-extension
            .rake
            --no-stdlib
            """,
        ),
    )
    assert config.paths == [".", "lib", "app"]
    assert config.ignore == ["vendor/", "tmp/"]
    assert config.allowed_extensions == [".rb", ".rake"]
    assert config.effective_extensions == [".rb", ".rake"]
    assert config.no_stdlib


def test_parse_skips_unknown_options_and_their_values() -> None:
    config = SorbetConfig.parse_string(
        dedent(
            """\
            --cache-dir
            .cache/sorbet
            --suppress-error-code=7003
            -v
            lib
            --enable-experimental-requires-ancestor
            """,
        ),
    )
    assert config.paths == ["lib"]
    assert config.ignore == []


def test_parse_strips_whitespace() -> None:
    config = SorbetConfig.parse_string("  lib  \n  --ignore= spec/fixtures \n")
    assert config.paths == ["lib"]
    assert config.ignore == ["spec/fixtures"]


def test_copy_is_independent() -> None:
    config = SorbetConfig(paths=["."], ignore=["vendor"])
    clone = config.copy()
    clone.ignore.append("tmp")
    assert config.ignore == ["vendor"]
    assert clone == SorbetConfig(paths=["."], ignore=["vendor", "tmp"])


def test_options_string() -> None:
    config = SorbetConfig(paths=[".", "lib"], ignore=["vendor"], allowed_extensions=[".rb"], no_stdlib=True)
    assert config.options_string() == "'.' 'lib' --ignore 'vendor' --allowed-extension '.rb' --no-stdlib"


def test_parse_skips_file_options() -> None:
    config = SorbetConfig.parse_string("lib\n--file=extra.rb\n--file\nother.rb\napp\n")
    assert config.paths == ["lib", "app"]
