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

"""Track reconciliation: compare ``config.json`` with ``exercises/``."""

from __future__ import annotations

from .discovery import find_all_files, is_hidden, list_exercise_dirs, resolve_exercise_dir
from .reconcile import Track, compile_solution_pattern, has_example_file

__all__ = [
    "Track",
    "compile_solution_pattern",
    "find_all_files",
    "has_example_file",
    "is_hidden",
    "list_exercise_dirs",
    "resolve_exercise_dir",
]
