# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Lint command implementation for the configlet CLI."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from configlet.cli.helpers import echo, parse_check_names, register_argument
from configlet.compat import assert_never
from configlet.core.model_types import CheckName, LogComponent, ReportFormat
from configlet.logging import structured_extra
from configlet.services.lint import run_lint
from configlet.track import Track

if TYPE_CHECKING:
    from collections.abc import Sequence

    from configlet.cli.types import SubparserCollection
    from configlet.services.lint import LintReport

logger: logging.Logger = logging.getLogger("configlet.cli")


def register_lint_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Register the `configlet lint` command.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    lint = subparsers.add_parser(
        "lint",
        help="Check that config.json agrees with the exercises on disk",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        lint,
        "path",
        type=Path,
        help="Path to the track repository (the directory holding config.json)",
    )
    register_argument(
        lint,
        "--format",
        dest="report_format",
        choices=[fmt.value for fmt in ReportFormat],
        default=ReportFormat.TEXT.value,
        help="Report format written to stdout",
    )
    register_argument(
        lint,
        "--check",
        dest="checks",
        action="append",
        choices=[check.value for check in CheckName],
        default=None,
        help="Run only the named check (repeatable; default: all checks)",
    )


def _print_text_report(report: LintReport) -> None:
    for outcome in report.failures:
        message = outcome.message()
        if message:
            echo(message)
    if report.is_ok:
        echo("... OK")


def execute_lint(args: argparse.Namespace) -> int:
    """Execute the `configlet lint` command.

    Args:
        args: Parsed CLI namespace with ``path``, ``report_format`` and ``checks``.

    Returns:
        `0` when every check passes, `1` otherwise.
    """
    track = Track(args.path)
    report_format = ReportFormat(args.report_format)
    if report_format is ReportFormat.TEXT:
        echo(f"Evaluating {track.root}")
    report = run_lint(track, parse_check_names(args.checks))
    if report_format is ReportFormat.JSON:
        echo(json.dumps(report.to_payload(), indent=2))
    elif report_format is ReportFormat.TEXT:
        _print_text_report(report)
    else:
        assert_never(report_format)
    exit_code = 0 if report.is_ok else 1
    logger.info(
        "Lint finished for %s (%s failing checks)",
        track.root,
        len(report.failures),
        extra=structured_extra(
            component=LogComponent.CLI,
            path=track.root,
            count=len(report.failures),
            exit_code=exit_code,
        ),
    )
    return exit_code


__all__ = ["execute_lint", "register_lint_command"]
