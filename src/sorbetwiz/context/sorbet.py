# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Sorbet support for a project context.

By default Sorbet runs through ``bundle exec srb`` so the version locked in the
project's Gemfile is used. Passing ``sorbet_bin`` runs that binary directly.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from sorbetwiz._internal.logging_utils import structured_extra
from sorbetwiz.core.model_types import LogComponent
from sorbetwiz.git import Commit
from sorbetwiz.sorbet import sigils
from sorbetwiz.sorbet.config import SorbetConfig
from sorbetwiz.sorbet.constants import CONFIG_PATH, DEFAULT_BIN, METRICS_FILE, TYPECHECK_SUBCOMMAND
from sorbetwiz.sorbet.errors import CheckerOutcome
from sorbetwiz.sorbet.metrics import Metrics, MetricsParser

if TYPE_CHECKING:
    from sorbetwiz.core.types import ExecResult

    from .base import ContextPrimitives
    from .bundle import BundleHelper

logger: logging.Logger = logging.getLogger("sorbetwiz.context.sorbet")

_COMMIT_FORMAT = "--format='%h %at'"


class SorbetHelper:
    """Run Sorbet and read its files inside a context directory."""

    def __init__(self, context: ContextPrimitives, bundle: BundleHelper) -> None:
        self._context = context
        self._bundle = bundle

    # Running Sorbet

    def srb_outcome(self, *args: str, sorbet_bin: str | None = None, capture_err: bool = True) -> CheckerOutcome:
        """Run Sorbet and classify how the process terminated.

        Unlike ``srb`` this never raises for a killed or crashed process; the
        returned outcome carries the captured result in every case.
        """
        arg_string = " ".join(args)
        if sorbet_bin:
            res = self._context.exec(f"{sorbet_bin} {arg_string}", capture_err=capture_err)
        else:
            res = self._bundle.exec(f"{DEFAULT_BIN} {arg_string}", capture_err=capture_err)
        outcome = CheckerOutcome.classify(res)
        if not outcome.completed:
            logger.error(
                "Sorbet terminated abnormally (%s, exit=%s)",
                outcome.kind,
                res.exit_code,
                extra=structured_extra(
                    LogComponent.SORBET,
                    tool=sorbet_bin or DEFAULT_BIN,
                    exit_code=res.exit_code,
                    details={"outcome": outcome.kind.value},
                ),
            )
        return outcome

    def srb(self, *args: str, sorbet_bin: str | None = None, capture_err: bool = True) -> ExecResult:
        """Run ``bundle exec srb <args>`` (or ``<sorbet_bin> <args>``).

        Raises:
            Killed: If the process was killed.
            Segfault: If the process crashed with a segmentation fault.
        """
        return self.srb_outcome(*args, sorbet_bin=sorbet_bin, capture_err=capture_err).unwrap()

    def srb_tc(self, *args: str, sorbet_bin: str | None = None, capture_err: bool = True) -> ExecResult:
        """Run ``srb tc``.

        The ``tc`` subcommand is only added when going through ``bundle exec``;
        an explicit ``sorbet_bin`` receives ``args`` unchanged.
        """
        if not sorbet_bin:
            args = (TYPECHECK_SUBCOMMAND, *args)
        return self.srb(*args, sorbet_bin=sorbet_bin, capture_err=capture_err)

    def srb_metrics(self, *args: str, sorbet_bin: str | None = None, capture_err: bool = False) -> Metrics | None:
        """Type check with ``--metrics-file`` and return the collected metrics.

        The metrics are written to a fixed ``metrics.tmp`` file in the context
        directory, which is removed once parsed. Concurrent calls against the
        same directory are not supported.
        """
        _ = self.srb_tc(
            "--metrics-file",
            METRICS_FILE,
            *args,
            sorbet_bin=sorbet_bin,
            capture_err=capture_err,
        )
        if not self._context.file(METRICS_FILE):
            return None
        metrics = MetricsParser.parse_file(self._context.absolute_path_to(METRICS_FILE))
        self._context.remove(METRICS_FILE)
        return metrics

    def srb_version(self, *args: str, sorbet_bin: str | None = None, capture_err: bool = True) -> str | None:
        """Return the Sorbet version, e.g. ``0.5.10782`` from ``Sorbet typechecker 0.5.10782 git ...``."""
        res = self.srb_tc("--no-config", "--version", *args, sorbet_bin=sorbet_bin, capture_err=capture_err)
        if not res.status:
            return None
        tokens = res.out.split()
        return tokens[2] if len(tokens) > 2 else None  # noqa: PLR2004

    # Files

    def srb_files(self, with_config: SorbetConfig | None = None) -> list[str]:
        """List the files Sorbet type checks according to its config."""
        config = with_config if with_config is not None else self.config()
        regs = [re.compile(re.escape(string)) for string in config.ignore]
        files: set[str] = set()
        for ext in config.effective_extensions:
            files.update(self._context.glob(f"**/*{ext}"))
        return sorted(path for path in files if not any(reg.search(path) for reg in regs))

    def read_file_strictness(self, relative_path: str) -> str | None:
        """Return the strictness sigil of ``relative_path``, or ``None`` without one."""
        return sigils.file_strictness(self._context.absolute_path_to(relative_path))

    # Config

    def has_config(self) -> bool:
        return self._context.file(CONFIG_PATH)

    def config(self) -> SorbetConfig:
        return SorbetConfig.parse_string(self.read_config())

    def read_config(self) -> str:
        return self._context.read(CONFIG_PATH)

    def write_config(self, contents: str, *, append: bool = False) -> None:
        self._context.write(CONFIG_PATH, contents, append=append)

    # History

    def intro_commit(self) -> Commit | None:
        """Return the commit that added ``sorbet/config``."""
        return self._config_commit("A")

    def removal_commit(self) -> Commit | None:
        """Return the commit that deleted ``sorbet/config``."""
        return self._config_commit("D")

    def _config_commit(self, diff_filter: str) -> Commit | None:
        res = self._context.git_log(f"--diff-filter={diff_filter}", _COMMIT_FORMAT, "-1", "--", CONFIG_PATH)
        if not res.status:
            return None
        out = res.out.strip()
        if not out:
            return None
        return Commit.parse_line(out)


__all__ = ["SorbetHelper"]
