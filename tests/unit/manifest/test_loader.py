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

"""Unit tests for loading manifests from disk."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from configlet.exceptions import ManifestParseError, ManifestReadError, ParseError, ReadError
from configlet.manifest import load_manifest
from tests.fixtures.builders import manifest_payload

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


def _write(path: Path, text: str) -> Path:
    _ = path.write_text(text, encoding="utf-8")
    return path


def test_load_manifest_reads_all_categories(tmp_path: Path) -> None:
    payload = manifest_payload(exercises=["bob", "leap"], deprecated=["accumulate"], foregone=["trivial"])
    path = _write(tmp_path / "config.json", json.dumps(payload))

    manifest = load_manifest(path)

    assert manifest.active is True
    assert manifest.slugs() == ["bob", "leap"]
    assert manifest.deprecated == ["accumulate"]
    assert manifest.foregone == ["trivial"]
    assert manifest.language == "Go"


def test_load_manifest_accepts_str_path(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.json", "{}")
    assert load_manifest(str(path)).exercises == []


def test_missing_optional_fields_default_to_empty(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.json", json.dumps({"exercises": [{"slug": "bob"}]}))
    manifest = load_manifest(path)
    assert manifest.deprecated == []
    assert manifest.foregone == []
    assert manifest.solution_pattern == "[Ee]xample"


def test_empty_solution_pattern_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.json", json.dumps({"solution_pattern": ""}))
    assert load_manifest(path).solution_pattern == "[Ee]xample"


def test_null_fields_are_treated_as_absent(tmp_path: Path) -> None:
    payload = {
        "active": None,
        "exercises": [
            {"slug": "bob", "uuid": None, "core": None, "deprecated": None, "difficulty": None, "topics": None},
        ],
        "deprecated": None,
        "foregone": None,
        "language": None,
        "solution_pattern": None,
    }
    path = _write(tmp_path / "config.json", json.dumps(payload))

    manifest = load_manifest(path)

    assert manifest.slugs() == ["bob"]
    assert manifest.deprecated == []
    assert manifest.foregone == []
    assert manifest.language == ""
    assert manifest.solution_pattern == "[Ee]xample"
    exercise = manifest.exercises[0]
    assert (exercise.uuid, exercise.core, exercise.difficulty, exercise.topics) == ("", False, 0, None)


def test_null_exercises_list_is_empty(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.json", json.dumps({"exercises": None, "Deprecated": None}))
    manifest = load_manifest(path)
    assert manifest.exercises == []
    assert manifest.deprecated == []


def test_explicit_solution_pattern_is_kept(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.json", json.dumps({"solution_pattern": r"\.meta/"}))
    assert load_manifest(path).solution_pattern == r"\.meta/"


def test_missing_file_raises_read_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    with pytest.raises(ManifestReadError) as excinfo:
        _ = load_manifest(path)
    assert isinstance(excinfo.value, ReadError)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.error, FileNotFoundError)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_directory_in_place_of_file_raises_read_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.mkdir()
    with pytest.raises(ManifestReadError):
        _ = load_manifest(path)


def test_malformed_json_raises_parse_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.json", '{"exercises": [')
    with pytest.raises(ManifestParseError) as excinfo:
        _ = load_manifest(path)
    assert isinstance(excinfo.value, ParseError)
    assert str(excinfo.value).startswith(f"Unable to parse config: {path} -- ")
    assert isinstance(excinfo.value.error, json.JSONDecodeError)


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"exercises": {"slug": "bob"}},
        {"foregone": "trivial"},
        {"exercises": [{"slug": 12}]},
    ],
)
def test_wrong_shape_raises_parse_error(tmp_path: Path, payload: object) -> None:
    path = _write(tmp_path / "config.json", json.dumps(payload))
    with pytest.raises(ManifestParseError) as excinfo:
        _ = load_manifest(path)
    assert isinstance(excinfo.value.error, ValidationError)
    assert str(path) in str(excinfo.value)
