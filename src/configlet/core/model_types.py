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

"""Enumerations shared by the configlet service, logging and CLI layers."""

from __future__ import annotations

from configlet.compat import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable components.

    Attributes:
        CLI: Command-line interface component.
        MANIFEST: Manifest loading component.
        TRACK: Track reconciliation component.
        SERVICES: Service layer component.
    """

    CLI = "cli"
    MANIFEST = "manifest"
    TRACK = "track"
    SERVICES = "services"


class CheckName(StrEnum):
    """Identifiers for the consistency checks run against a track.

    The declaration order is the order in which the lint service runs them.
    """

    CONFIG = "config"
    MISSING_DIRECTORIES = "missing-directories"
    UNCONFIGURED_DIRECTORIES = "unconfigured-directories"
    MISSING_EXAMPLES = "missing-examples"
    FOREGONE = "foregone"
    DUPLICATES = "duplicates"

    @classmethod
    def from_str(cls, raw: str) -> CheckName:
        """Create a CheckName enum from a string value.

        Args:
            raw: String representation of the check (underscores accepted).

        Returns:
            CheckName enum value.

        Raises:
            ValueError: If the string does not match any CheckName value.
        """
        value = raw.strip().lower().replace("_", "-")
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown check '{raw}'"
            raise ValueError(msg) from exc


class ReportFormat(StrEnum):
    """Output formats supported by ``configlet lint``."""

    TEXT = "text"
    JSON = "json"


__all__ = ["CheckName", "LogComponent", "LogFormat", "ReportFormat"]
