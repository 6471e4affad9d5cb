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

"""Filesystem discovery for exercise directories and their files.

Directories whose name starts with a dot are invisible everywhere: they are
never reported as implemented exercises and never satisfy a slug lookup.
"""

from __future__ import annotations

import stat
from pathlib import PurePath
from typing import TYPE_CHECKING

from configlet.config.constants import HIDDEN_PREFIX
from configlet.core.type_aliases import RelPath, Slug, SlugSet
from configlet.exceptions import TrackReadError

if TYPE_CHECKING:
    from pathlib import Path


def is_hidden(name: str) -> bool:
    """Return whether a directory name is hidden (starts with a dot)."""
    return name.startswith(HIDDEN_PREFIX)


def list_exercise_dirs(exercises_path: Path) -> SlugSet:
    """Return the names of the visible subdirectories of ``exercises_path``.

    Args:
        exercises_path: The track's ``exercises`` directory.

    Returns:
        Names of non-hidden directories directly under ``exercises_path``;
        empty when the directory does not exist.

    Raises:
        TrackReadError: If the directory exists but cannot be listed.
    """
    try:
        entries = list(exercises_path.iterdir())
    except FileNotFoundError:
        return frozenset()
    except OSError as exc:
        raise TrackReadError(exercises_path, exc) from exc
    names: set[str] = set()
    for entry in entries:
        if is_hidden(entry.name):
            continue
        try:
            if entry.is_dir():
                names.add(entry.name)
        except OSError as exc:
            raise TrackReadError(entry, exc) from exc
    return frozenset(names)


def resolve_exercise_dir(exercises_path: Path, slug: Slug) -> Path | None:
    """Return the implementation directory for ``slug`` if one exists.

    Args:
        exercises_path: The track's ``exercises`` directory.
        slug: Exercise identifier to look up.

    Returns:
        ``exercises_path / slug`` when it is a visible directory, else ``None``.
        A slug with a root or drive never resolves, so lookups stay inside
        ``exercises_path``.

    Raises:
        TrackReadError: On filesystem errors other than a missing path.
    """
    if not slug or is_hidden(slug) or PurePath(slug).anchor:
        return None
    candidate = exercises_path / slug
    try:
        info = candidate.stat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as exc:
        raise TrackReadError(candidate, exc) from exc
    return candidate if stat.S_ISDIR(info.st_mode) else None


def find_all_files(directory: Path) -> list[RelPath]:
    """List every file below ``directory``, descending into subdirectories.

    Symbolic links are reported as files and never followed.

    Args:
        directory: Root of the walk, typically one exercise directory.

    Returns:
        Sorted POSIX paths relative to ``directory``.

    Raises:
        TrackReadError: If any directory in the tree cannot be listed.
    """
    files: list[RelPath] = []
    pending: list[Path] = [directory]
    while pending:
        current = pending.pop()
        try:
            entries = list(current.iterdir())
        except OSError as exc:
            raise TrackReadError(current, exc) from exc
        for entry in entries:
            try:
                is_subdir = not entry.is_symlink() and entry.is_dir()
            except OSError as exc:
                raise TrackReadError(entry, exc) from exc
            if is_subdir:
                pending.append(entry)
            else:
                files.append(entry.relative_to(directory).as_posix())
    return sorted(files)


__all__ = ["find_all_files", "is_hidden", "list_exercise_dirs", "resolve_exercise_dir"]
