# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Parser for Sorbet's ``sorbet/config`` argument file.

The config file holds one command-line argument per line. Only the options
that change which files Sorbet looks at are modelled; every other option is
recognised and skipped, including its value line when the option is written
in the two-line ``--opt`` / ``value`` form. ``--file`` is one of the skipped
options, so single-file entries never show up in ``paths``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Final

from .constants import DEFAULT_ALLOWED_EXTENSIONS

_OPTION_WITH_VALUE: Final[re.Pattern[str]] = re.compile(r"^--[\w-]+=")


class _PendingValue(Enum):
    DIR = auto()
    IGNORE = auto()
    EXTENSION = auto()
    SKIP = auto()


@dataclass(slots=True)
class SorbetConfig:
    """Parsed contents of a Sorbet config file.

    Attributes:
        paths: Directories or files passed positionally or through ``--dir``.
            ``--file`` entries are skipped like any other option.
        ignore: Path fragments from ``--ignore``.
        allowed_extensions: Extensions from ``--allowed-extension``.
        no_stdlib: Whether ``--no-stdlib`` is set.
    """

    paths: list[str] = field(default_factory=list)
    ignore: list[str] = field(default_factory=list)
    allowed_extensions: list[str] = field(default_factory=list)
    no_stdlib: bool = False

    @classmethod
    def parse_string(cls, sorbet_config: str) -> SorbetConfig:
        config = cls()
        pending: _PendingValue | None = None
        for raw_line in sorbet_config.splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("--"):
                pending = config._apply_option(line)
                continue
            if line.startswith("-"):
                # Short options carry no value line.
                pending = None
                continue
            match pending:
                case _PendingValue.IGNORE:
                    config.ignore.append(line)
                case _PendingValue.EXTENSION:
                    config.allowed_extensions.append(line)
                case _PendingValue.SKIP:
                    pass
                case _:
                    config.paths.append(line)
            pending = None
        return config

    def _apply_option(self, line: str) -> _PendingValue | None:
        name, sep, value = line.partition("=")
        value = value.strip()
        match name:
            case "--dir":
                if not sep:
                    return _PendingValue.DIR
                self.paths.append(value)
            case "--ignore":
                if not sep:
                    return _PendingValue.IGNORE
                self.ignore.append(value)
            case "--allowed-extension":
                if not sep:
                    return _PendingValue.EXTENSION
                self.allowed_extensions.append(value)
            case "--no-stdlib":
                self.no_stdlib = True
            case _ if _OPTION_WITH_VALUE.match(line):
                return None
            case _:
                return _PendingValue.SKIP
        return None

    @property
    def effective_extensions(self) -> list[str]:
        """Extensions Sorbet checks: the declared ones or ``.rb``/``.rbi``."""
        return list(self.allowed_extensions) if self.allowed_extensions else list(DEFAULT_ALLOWED_EXTENSIONS)

    def copy(self) -> SorbetConfig:
        return SorbetConfig(
            paths=list(self.paths),
            ignore=list(self.ignore),
            allowed_extensions=list(self.allowed_extensions),
            no_stdlib=self.no_stdlib,
        )

    def options_string(self) -> str:
        """Render the config back as a single command-line options string."""
        opts: list[str] = [f"'{path}'" for path in self.paths]
        opts.extend(f"--ignore '{ignore}'" for ignore in self.ignore)
        opts.extend(f"--allowed-extension '{ext}'" for ext in self.allowed_extensions)
        if self.no_stdlib:
            opts.append("--no-stdlib")
        return " ".join(opts)


__all__ = ["SorbetConfig"]
