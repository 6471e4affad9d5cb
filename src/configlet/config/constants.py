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

"""Shared defaults for track layout and manifest values."""

from __future__ import annotations

from typing import Final

DEFAULT_MANIFEST_FILENAME: Final[str] = "config.json"
EXERCISES_DIRNAME: Final[str] = "exercises"
HIDDEN_PREFIX: Final[str] = "."
# Matches any path containing "Example" or "example".
DEFAULT_SOLUTION_PATTERN: Final[str] = "[Ee]xample"

__all__ = [
    "DEFAULT_MANIFEST_FILENAME",
    "DEFAULT_SOLUTION_PATTERN",
    "EXERCISES_DIRNAME",
    "HIDDEN_PREFIX",
]
