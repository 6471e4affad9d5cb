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

"""Run every track check and collect the outcomes.

Each check is isolated: an error raised by one query is recorded on its
outcome and the remaining checks still run, so a single report shows every
problem with the track.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from configlet.core.model_types import CheckName, LogComponent
from configlet.error_codes import error_code_for
from configlet.exceptions import ConfigletError
from configlet.logging import structured_extra
from configlet.track import Track

if TYPE_CHECKING:
    from pathlib import Path

logger: logging.Logger = logging.getLogger("configlet.services")

CHECK_ORDER: Final[tuple[CheckName, ...]] = tuple(CheckName)

_QUERIES: Final[dict[CheckName, Callable[[Track], list[str]]]] = {
    CheckName.MISSING_DIRECTORIES: Track.missing_directories,
    CheckName.UNCONFIGURED_DIRECTORIES: Track.unconfigured_directories,
    CheckName.MISSING_EXAMPLES: Track.missing_example_solutions,
    CheckName.FOREGONE: Track.foregone_violations,
    CheckName.DUPLICATES: Track.duplicate_slugs,
}

_MESSAGES: Final[dict[CheckName, str]] = {
    CheckName.MISSING_DIRECTORIES: "-> No directory found for {items}.",
    CheckName.UNCONFIGURED_DIRECTORIES: "-> config.json does not include {items}.",
    CheckName.MISSING_EXAMPLES: "-> missing example solution in {items}.",
    CheckName.FOREGONE: "-> {items} should not be implemented.",
    CheckName.DUPLICATES: "-> {items} found in multiple categories.",
}
INVALID_CONFIG_MESSAGE: Final[str] = "-> config.json is invalid"


@dataclass(slots=True, frozen=True)
class CheckOutcome:
    """Result of running one check against a track.

    Attributes:
        check: Which check produced this outcome.
        violations: Offending slugs or directory names.
        error: Exception raised by the check, if it could not complete.
        valid: Result of the config validity check; always ``True`` for
            the other checks.
    """

    check: CheckName
    violations: tuple[str, ...] = ()
    error: ConfigletError | None = None
    valid: bool = True

    @property
    def failed(self) -> bool:
        """Whether the outcome should fail the run."""
        return not self.valid or self.error is not None or bool(self.violations)

    def message(self) -> str | None:
        """Render the one-line report for a failing check.

        Returns:
            Human-readable summary, or ``None`` when the check passed.
        """
        if self.error is not None:
            return f"-> ({error_code_for(self.error)}) {self.error}"
        if not self.valid:
            return INVALID_CONFIG_MESSAGE
        if self.violations:
            items = " ".join(self.violations)
            return _MESSAGES[self.check].format(items=f"[{items}]")
        return None

    def to_payload(self) -> dict[str, object]:
        """Return a JSON-compatible representation of the outcome."""
        error: dict[str, str] | None = None
        if self.error is not None:
            error = {"code": error_code_for(self.error), "message": str(self.error)}
        return {
            "check": self.check.value,
            "ok": not self.failed,
            "violations": list(self.violations),
            "error": error,
        }


@dataclass(slots=True, frozen=True)
class LintReport:
    """Outcomes of every check run against one track.

    Attributes:
        root: Track directory that was evaluated.
        outcomes: Check outcomes in execution order.
    """

    root: Path
    outcomes: tuple[CheckOutcome, ...] = field(default_factory=tuple)

    @property
    def is_ok(self) -> bool:
        """Whether every check passed."""
        return not any(outcome.failed for outcome in self.outcomes)

    @property
    def failures(self) -> tuple[CheckOutcome, ...]:
        """Outcomes that failed, in execution order."""
        return tuple(outcome for outcome in self.outcomes if outcome.failed)

    def to_payload(self) -> dict[str, object]:
        """Return a JSON-compatible representation of the report."""
        return {
            "track": str(self.root),
            "ok": self.is_ok,
            "checks": [outcome.to_payload() for outcome in self.outcomes],
        }


def run_check(track: Track, check: CheckName) -> CheckOutcome:
    """Run a single check and capture its result or error.

    Args:
        track: Track to evaluate.
        check: Check to run.

    Returns:
        Outcome carrying either the violations or the raised error.
    """
    if check is CheckName.CONFIG:
        return CheckOutcome(check=check, valid=track.has_valid_config())
    try:
        violations = _QUERIES[check](track)
    except ConfigletError as exc:
        logger.warning(
            "Check %s failed: %s",
            check,
            exc,
            extra=structured_extra(
                component=LogComponent.SERVICES,
                check=check,
                path=track.root,
                details={"code": error_code_for(exc)},
            ),
        )
        return CheckOutcome(check=check, error=exc)
    logger.info(
        "Check %s reported %s violations",
        check,
        len(violations),
        extra=structured_extra(
            component=LogComponent.SERVICES,
            check=check,
            path=track.root,
            count=len(violations),
        ),
    )
    return CheckOutcome(check=check, violations=tuple(violations))


def run_lint(track: Track, checks: Sequence[CheckName] | None = None) -> LintReport:
    """Run the requested checks (all of them by default) against a track.

    Args:
        track: Track to evaluate.
        checks: Optional subset of checks; they always run in the canonical
            order regardless of the order given.

    Returns:
        Report collecting every outcome.
    """
    selected = set(checks) if checks is not None else set(CHECK_ORDER)
    outcomes = tuple(run_check(track, check) for check in CHECK_ORDER if check in selected)
    return LintReport(root=track.root, outcomes=outcomes)


__all__ = ["CHECK_ORDER", "CheckOutcome", "LintReport", "run_check", "run_lint"]
