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

"""Load a track manifest from disk.

Reading, decoding and shape validation each fail with a distinct exception so
callers can tell an unreadable file from a malformed one.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from configlet.core.model_types import LogComponent
from configlet.exceptions import ManifestParseError, ManifestReadError
from configlet.logging import structured_extra

from .models import ManifestModel, normalise_manifest

logger: logging.Logger = logging.getLogger("configlet.manifest")


def load_manifest(path: Path | str) -> ManifestModel:
    """Read, parse and normalise a track manifest.

    Args:
        path: Location of the manifest, conventionally ``<track>/config.json``.

    Returns:
        The validated manifest with defaults applied.

    Raises:
        ManifestReadError: If the file cannot be opened or read.
        ManifestParseError: If the content is not JSON or has the wrong shape.
    """
    manifest_path = Path(path)
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestReadError(manifest_path, exc) from exc
    except UnicodeDecodeError as exc:
        raise ManifestParseError(manifest_path, exc) from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(manifest_path, exc) from exc
    try:
        manifest = ManifestModel.model_validate(raw)
    except ValidationError as exc:
        raise ManifestParseError(manifest_path, exc) from exc
    manifest = normalise_manifest(manifest)
    logger.debug(
        "Loaded manifest %s (%s exercises, %s deprecated, %s foregone)",
        manifest_path,
        len(manifest.exercises),
        len(manifest.deprecated),
        len(manifest.foregone),
        extra=structured_extra(component=LogComponent.MANIFEST, path=manifest_path),
    )
    return manifest


__all__ = ["load_manifest"]
