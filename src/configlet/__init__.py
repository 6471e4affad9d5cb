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

"""configlet - consistency checks for exercise tracks.

Validates that a track's ``config.json`` manifest agrees with the exercise
directories on disk: every delivered exercise has a directory, every
directory is declared, implemented exercises ship a reference solution,
foregone exercises stay unimplemented, and no slug sits in more than one
lifecycle category.
"""

from __future__ import annotations

from .exceptions import (
    ConfigletError,
    ManifestParseError,
    ManifestReadError,
    ParseError,
    PatternError,
    ReadError,
    SolutionPatternError,
    TrackReadError,
)
from .manifest import ExerciseModel, ManifestModel, load_manifest, render_manifest
from .services import CheckOutcome, LintReport, run_lint
from .track import Track

__all__ = [
    "CheckOutcome",
    "ConfigletError",
    "ExerciseModel",
    "LintReport",
    "ManifestModel",
    "ManifestParseError",
    "ManifestReadError",
    "ParseError",
    "PatternError",
    "ReadError",
    "SolutionPatternError",
    "Track",
    "TrackReadError",
    "__version__",
    "load_manifest",
    "render_manifest",
    "run_lint",
]

__version__ = "0.1.0"
