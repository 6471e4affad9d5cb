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

"""Exception hierarchy for configlet.

Every failure raised by the manifest loader or the track reconciler derives
from :class:`ConfigletError`, so callers can aggregate check failures without
catching unrelated exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import re
    from pathlib import Path

    from pydantic import ValidationError

__all__ = [
    "ConfigletError",
    "ManifestParseError",
    "ManifestReadError",
    "ParseError",
    "PatternError",
    "ReadError",
    "SolutionPatternError",
    "TrackReadError",
]


class ConfigletError(Exception):
    """Base error for all configlet exceptions."""


class ReadError(ConfigletError):
    """Raised when a file or directory cannot be read.

    Attributes:
        path: Filesystem path that could not be read.
        error: Underlying operating system error.
    """

    def __init__(self, path: Path, error: OSError) -> None:
        """Initialize the exception with the offending path and I/O error.

        Args:
            path: Filesystem path that could not be read.
            error: Underlying operating system error.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class ManifestReadError(ReadError):
    """Raised when the track manifest cannot be opened or read."""


class TrackReadError(ReadError):
    """Raised when an exercise directory or file cannot be listed."""


class ParseError(ConfigletError):
    """Raised when structured content cannot be decoded."""


class ManifestParseError(ParseError):
    """Raised when the manifest is not well-formed JSON or has the wrong shape.

    Attributes:
        path: Manifest file that failed to parse.
        error: JSON decoder or pydantic validation error.
    """

    def __init__(self, path: Path, error: ValueError | ValidationError) -> None:
        """Initialize the exception with the manifest path and parser error.

        Args:
            path: Manifest file that failed to parse.
            error: JSON decoder or pydantic validation error.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to parse config: {path} -- {error}")


class PatternError(ConfigletError, ValueError):
    """Raised when a configured pattern is not a valid regular expression."""


class SolutionPatternError(PatternError):
    """Raised when ``solution_pattern`` cannot be compiled.

    Attributes:
        pattern: The pattern text taken from the manifest.
        error: Error reported by the regular expression compiler.
    """

    def __init__(self, pattern: str, error: re.error) -> None:
        """Initialize the exception with the pattern and compiler error.

        Args:
            pattern: The pattern text taken from the manifest.
            error: Error reported by the regular expression compiler.
        """
        self.pattern = pattern
        self.error = error
        super().__init__(f"Invalid solution_pattern {pattern!r}: {error}")
