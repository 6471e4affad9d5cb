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

"""Pydantic models for the track manifest (``config.json``).

The manifest lists every exercise slug a track knows about, split into the
default-delivered ``exercises``, the ``deprecated`` slugs that are still
implemented, and the ``foregone`` slugs that must never be implemented.
Models are frozen: a parsed manifest is never mutated, and normalisation
produces a new instance.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar, Final

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    StrictBool,
    StrictInt,
    StrictStr,
    model_validator,
)

from configlet.config.constants import DEFAULT_SOLUTION_PATTERN

MANIFEST_MODEL_CONFIG: ConfigDict = ConfigDict(
    extra="ignore",
    frozen=True,
    populate_by_name=True,
)
DEPRECATED_KEY: Final[str] = "deprecated"
NULLABLE_EXERCISE_FIELDS: Final[frozenset[str]] = frozenset({"topics", "unlocked_by"})


def _drop_nulls(data: Any, *, keep: frozenset[str] = frozenset()) -> Any:  # noqa: ANN401
    # A JSON null leaves the field at its default, the same as an absent key.
    if not isinstance(data, dict):
        return data
    return {key: value for key, value in data.items() if value is not None or key in keep}


class ExerciseModel(BaseModel):
    """One implemented exercise, listed in API delivery order.

    Attributes:
        slug: Identifier of the exercise, also its directory name.
        uuid: Opaque identifier assigned by the track maintainers.
        core: Whether the exercise is part of the core progression.
        deprecated: Informational flag; the manifest-level ``deprecated``
            list is authoritative.
        difficulty: Free-form difficulty rating.
        topics: Topic tags, or ``None`` when the manifest carries ``null``.
        unlocked_by: Prerequisite value, carried through untouched.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    slug: StrictStr
    uuid: StrictStr = ""
    core: StrictBool = False
    deprecated: StrictBool = False
    difficulty: StrictInt = 0
    topics: list[StrictStr] | None = None
    unlocked_by: JsonValue = None

    @model_validator(mode="before")
    @classmethod
    def _ignore_null_fields(cls, data: Any) -> Any:  # noqa: ANN401
        return _drop_nulls(data, keep=NULLABLE_EXERCISE_FIELDS)


class ManifestModel(BaseModel):
    """Root object of a track's ``config.json``.

    Attributes:
        active: Whether the track is enabled; not consulted by the checks.
        exercises: Default-delivered exercises in delivery order.
        deprecated: Slugs that are implemented but not served by default.
        foregone: Slugs that must not be implemented.
        ignore_pattern: Free-form metadata.
        language: Free-form metadata.
        repository: Free-form metadata.
        slug: Free-form metadata naming the track.
        solution_pattern: Regular expression identifying reference-solution
            files. Empty until :func:`normalise_manifest` fills the default.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    active: StrictBool = False
    exercises: list[ExerciseModel] = Field(default_factory=list)
    deprecated: list[StrictStr] = Field(default_factory=list)
    foregone: list[StrictStr] = Field(default_factory=list)
    ignore_pattern: StrictStr = ""
    language: StrictStr = ""
    repository: StrictStr = ""
    slug: StrictStr = ""
    solution_pattern: StrictStr = ""

    @model_validator(mode="before")
    @classmethod
    def _match_deprecated_key(cls, data: Any) -> Any:  # noqa: ANN401
        # The key has historically been matched case-insensitively, so
        # ``Deprecated`` is accepted when the lowercase key is absent.
        data = _drop_nulls(data)
        if not isinstance(data, dict) or DEPRECATED_KEY in data:
            return data
        for key in data:
            if isinstance(key, str) and key.lower() == DEPRECATED_KEY:
                payload = dict(data)
                payload[DEPRECATED_KEY] = payload.pop(key)
                return payload
        return data

    def slugs(self) -> list[str]:
        """Return the exercise slugs in delivery order."""
        return [exercise.slug for exercise in self.exercises]

    def declared_slugs(self) -> frozenset[str]:
        """Return every slug mentioned in any lifecycle category."""
        return frozenset(self.slugs()) | frozenset(self.deprecated) | frozenset(self.foregone)


def normalise_manifest(manifest: ManifestModel) -> ManifestModel:
    """Fill defaults for optional manifest values after parsing.

    Args:
        manifest: Freshly validated manifest.

    Returns:
        The same manifest when nothing needs defaulting, otherwise a copy with
        ``solution_pattern`` set to ``[Ee]xample``.
    """
    if manifest.solution_pattern:
        return manifest
    return manifest.model_copy(update={"solution_pattern": DEFAULT_SOLUTION_PATTERN})


def render_manifest(manifest: ManifestModel, *, indent: int = 2) -> str:
    """Serialise a manifest back to indented JSON.

    Args:
        manifest: Manifest to serialise.
        indent: Number of spaces per indentation level.

    Returns:
        JSON text using the canonical manifest keys.
    """
    return json.dumps(manifest.model_dump(mode="json", by_alias=True), indent=indent)


def manifest_json_schema() -> dict[str, Any]:
    """Return the JSON schema describing ``config.json``."""
    return ManifestModel.model_json_schema(by_alias=True)


__all__ = [
    "ExerciseModel",
    "ManifestModel",
    "manifest_json_schema",
    "normalise_manifest",
    "render_manifest",
]
