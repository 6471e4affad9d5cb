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

"""Unit tests for the manifest models."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from configlet.manifest import (
    ExerciseModel,
    ManifestModel,
    manifest_json_schema,
    normalise_manifest,
    render_manifest,
)

pytestmark = pytest.mark.unit


def test_manifest_defaults_are_empty() -> None:
    manifest = ManifestModel()
    assert manifest.active is False
    assert manifest.exercises == []
    assert manifest.deprecated == []
    assert manifest.foregone == []
    assert manifest.solution_pattern == ""


def test_normalise_manifest_fills_solution_pattern() -> None:
    manifest = normalise_manifest(ManifestModel())
    assert manifest.solution_pattern == "[Ee]xample"


def test_normalise_manifest_keeps_explicit_pattern() -> None:
    manifest = ManifestModel.model_validate({"solution_pattern": "reference"})
    assert normalise_manifest(manifest) is manifest
    assert manifest.solution_pattern == "reference"


def test_deprecated_key_matches_case_insensitively() -> None:
    manifest = ManifestModel.model_validate({"Deprecated": ["leap"]})
    assert manifest.deprecated == ["leap"]


def test_lowercase_deprecated_key_takes_precedence() -> None:
    manifest = ManifestModel.model_validate({"Deprecated": ["leap"], "deprecated": ["bob"]})
    assert manifest.deprecated == ["bob"]


def test_unknown_keys_are_ignored() -> None:
    manifest = ManifestModel.model_validate(
        {"checklist_issue": 13, "exercises": [{"slug": "bob", "extra": True}]},
    )
    assert manifest.slugs() == ["bob"]


def test_strict_types_reject_coercion() -> None:
    with pytest.raises(ValidationError):
        _ = ManifestModel.model_validate({"active": "true"})


def test_exercise_requires_slug() -> None:
    with pytest.raises(ValidationError):
        _ = ExerciseModel.model_validate({"uuid": "1234"})


def test_manifest_is_frozen() -> None:
    manifest = ManifestModel()
    with pytest.raises(ValidationError):
        manifest.active = True  # type: ignore[misc]


def test_declared_slugs_union_of_categories() -> None:
    manifest = ManifestModel.model_validate(
        {
            "exercises": [{"slug": "bob"}, {"slug": "leap"}],
            "deprecated": ["accumulate"],
            "foregone": ["hello-world", "bob"],
        },
    )
    assert manifest.slugs() == ["bob", "leap"]
    assert manifest.declared_slugs() == frozenset({"bob", "leap", "accumulate", "hello-world"})


def test_unlocked_by_round_trips_opaquely() -> None:
    payload = {"slug": "clock", "unlocked_by": ["bob", {"any": [1, 2]}]}
    exercise = ExerciseModel.model_validate(payload)
    assert exercise.unlocked_by == ["bob", {"any": [1, 2]}]
    assert exercise.model_dump(mode="json")["unlocked_by"] == payload["unlocked_by"]


def test_render_manifest_uses_canonical_keys_and_indent() -> None:
    manifest = ManifestModel.model_validate({"Deprecated": ["leap"], "exercises": [{"slug": "bob"}]})
    rendered = render_manifest(manifest)
    assert '\n  "deprecated": [' in rendered
    assert "Deprecated" not in rendered
    reparsed = ManifestModel.model_validate(json.loads(rendered))
    assert reparsed == manifest


def test_manifest_json_schema_describes_fields() -> None:
    schema = manifest_json_schema()
    properties = schema["properties"]
    assert {"exercises", "deprecated", "foregone", "solution_pattern"} <= set(properties)
