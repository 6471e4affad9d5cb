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

"""Reconcile a track manifest with the exercise directories on disk.

Every query reloads ``config.json`` and re-reads the filesystem, so a
:class:`Track` carries no state beyond its root path and queries can run in
any order.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from configlet._internal import dedupe_preserve
from configlet.config.constants import DEFAULT_MANIFEST_FILENAME, EXERCISES_DIRNAME
from configlet.core.model_types import CheckName, LogComponent
from configlet.core.type_aliases import Slug, SlugSet
from configlet.exceptions import ConfigletError, SolutionPatternError
from configlet.logging import structured_extra
from configlet.manifest import load_manifest, render_manifest

from .discovery import find_all_files, list_exercise_dirs, resolve_exercise_dir

if TYPE_CHECKING:
    from collections.abc import Iterable

    from configlet.manifest import ManifestModel

logger: logging.Logger = logging.getLogger("configlet.track")


def compile_solution_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a manifest ``solution_pattern``.

    Raises:
        SolutionPatternError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise SolutionPatternError(pattern, exc) from exc


def has_example_file(files: Iterable[str], pattern: re.Pattern[str]) -> bool:
    """Return whether any path contains a match for ``pattern``."""
    return any(pattern.search(path) for path in files)


@dataclass(slots=True, frozen=True)
class Track:
    """An exercise track rooted at ``root``.

    Attributes:
        root: Track directory holding ``config.json`` and ``exercises/``.
    """

    root: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))

    @property
    def config_path(self) -> Path:
        """Location of the track manifest."""
        return self.root / DEFAULT_MANIFEST_FILENAME

    @property
    def exercises_path(self) -> Path:
        """Directory holding one subdirectory per implemented exercise."""
        return self.root / EXERCISES_DIRNAME

    def manifest(self) -> ManifestModel:
        """Load the track manifest from disk."""
        return load_manifest(self.config_path)

    def implementation_dir(self, slug: Slug) -> Path | None:
        """Return the visible directory implementing ``slug``, if any."""
        return resolve_exercise_dir(self.exercises_path, slug)

    def problems(self) -> SlugSet:
        """Slugs delivered by default (the ``exercises`` list)."""
        return frozenset(self.manifest().slugs())

    def declared_slugs(self) -> SlugSet:
        """Slugs mentioned anywhere in the manifest."""
        return self.manifest().declared_slugs()

    def directories(self) -> SlugSet:
        """Names of the visible exercise directories currently on disk."""
        dirs = list_exercise_dirs(self.exercises_path)
        logger.debug(
            "Found %s exercise directories under %s",
            len(dirs),
            self.exercises_path,
            extra=structured_extra(component=LogComponent.TRACK, path=self.exercises_path, count=len(dirs)),
        )
        return dirs

    def has_valid_config(self) -> bool:
        """Check that the manifest loads and re-serialises cleanly.

        Returns:
            ``True`` when ``config.json`` parses and serialises back to JSON,
            ``False`` otherwise. The failure reason is logged.
        """
        try:
            rendered = render_manifest(self.manifest())
        except (ConfigletError, ValueError) as exc:
            logger.warning(
                "Manifest %s is invalid: %s",
                self.config_path,
                exc,
                extra=structured_extra(
                    component=LogComponent.TRACK,
                    check=CheckName.CONFIG,
                    path=self.config_path,
                ),
            )
            return False
        logger.debug("Re-serialised manifest:\n%s", rendered)
        return True

    def missing_directories(self) -> list[Slug]:
        """Default-delivered slugs with no exercise directory.

        Returns:
            Sorted slugs listed in ``exercises`` but absent from disk.
        """
        dirs = self.directories()
        return sorted(self.problems() - dirs)

    def unconfigured_directories(self) -> list[Slug]:
        """Exercise directories not mentioned anywhere in the manifest.

        Returns:
            Sorted directory names missing from every manifest category.
        """
        dirs = self.directories()
        return sorted(dirs - self.declared_slugs())

    def missing_example_solutions(self) -> list[Slug]:
        """Implemented exercises that lack a reference solution.

        A file whose path (relative to the exercise directory) matches
        ``solution_pattern`` counts as the reference solution. Files that do
        not match are served to students, so a missing match can leak a
        solution.

        Returns:
            Slugs in delivery order whose directory has no matching file.

        Raises:
            SolutionPatternError: If ``solution_pattern`` is not a valid regex.
            TrackReadError: If an exercise directory cannot be walked.
        """
        manifest = self.manifest()
        pattern = compile_solution_pattern(manifest.solution_pattern)
        issues: list[Slug] = []
        for slug in dedupe_preserve(manifest.slugs()):
            path = self.implementation_dir(slug)
            if path is None:
                continue
            files = find_all_files(path)
            if not has_example_file(files, pattern):
                logger.debug(
                    "No file matching %r in %s (%s files scanned)",
                    pattern.pattern,
                    path,
                    len(files),
                    extra=structured_extra(
                        component=LogComponent.TRACK,
                        check=CheckName.MISSING_EXAMPLES,
                        path=path,
                        count=len(files),
                    ),
                )
                issues.append(slug)
        return issues

    def foregone_violations(self) -> list[Slug]:
        """Foregone slugs that nevertheless have an exercise directory.

        Returns:
            Sorted slugs that must not be implemented but exist on disk.
        """
        manifest = self.manifest()
        dirs = self.directories()
        return sorted(set(manifest.foregone) & dirs)

    def duplicate_slugs(self) -> list[Slug]:
        """Slugs that appear more than once across the lifecycle categories.

        A deprecated slug is implemented but not served by default, and a
        foregone slug is never implemented, so each slug belongs to exactly
        one of ``exercises``, ``deprecated`` and ``foregone``.

        Returns:
            Sorted slugs with two or more occurrences.
        """
        manifest = self.manifest()
        counts = Counter([*manifest.slugs(), *manifest.deprecated, *manifest.foregone])
        return sorted(slug for slug, count in counts.items() if count > 1)


__all__ = ["Track", "compile_solution_pattern", "has_example_file"]
