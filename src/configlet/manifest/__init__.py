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

"""Track manifest models and loading.

Key components:
    - ManifestModel / ExerciseModel: frozen pydantic models for ``config.json``
    - load_manifest: read, validate and normalise a manifest file
    - render_manifest: indented JSON serialisation used by the validity check
"""

from __future__ import annotations

from .loader import load_manifest
from .models import (
    ExerciseModel,
    ManifestModel,
    manifest_json_schema,
    normalise_manifest,
    render_manifest,
)

__all__ = [
    "ExerciseModel",
    "ManifestModel",
    "load_manifest",
    "manifest_json_schema",
    "normalise_manifest",
    "render_manifest",
]
