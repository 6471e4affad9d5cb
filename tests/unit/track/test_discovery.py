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

"""Unit tests for exercise directory discovery and file walking."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from configlet.exceptions import TrackReadError
from configlet.track import find_all_files, is_hidden, list_exercise_dirs, resolve_exercise_dir

if TYPE_CHECKING:
    from collections.abc import Callable

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("name", "expected"),
    [(".meta", True), (".", True), ("bob", False), ("meta.", False)],
)
def test_is_hidden(name: str, expected: bool) -> None:
    assert is_hidden(name) is expected


def test_list_exercise_dirs_missing_directory_is_empty(tmp_path: Path) -> None:
    assert list_exercise_dirs(tmp_path / "exercises") == frozenset()


def test_list_exercise_dirs_skips_files_and_hidden(tmp_path: Path) -> None:
    exercises = tmp_path / "exercises"
    (exercises / "bob").mkdir(parents=True)
    (exercises / "leap").mkdir()
    (exercises / ".meta").mkdir()
    _ = (exercises / "README.md").write_text("", encoding="utf-8")

    assert list_exercise_dirs(exercises) == frozenset({"bob", "leap"})


def test_list_exercise_dirs_rejects_file_in_place_of_directory(tmp_path: Path) -> None:
    exercises = tmp_path / "exercises"
    _ = exercises.write_text("", encoding="utf-8")
    with pytest.raises(TrackReadError) as excinfo:
        _ = list_exercise_dirs(exercises)
    assert excinfo.value.path == exercises


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root ignores permissions")
def test_list_exercise_dirs_propagates_permission_errors(tmp_path: Path) -> None:
    exercises = tmp_path / "exercises"
    (exercises / "bob").mkdir(parents=True)
    exercises.chmod(0)
    try:
        with pytest.raises(TrackReadError):
            _ = list_exercise_dirs(exercises)
    finally:
        exercises.chmod(0o755)


def test_resolve_exercise_dir(tmp_path: Path) -> None:
    exercises = tmp_path / "exercises"
    (exercises / "bob").mkdir(parents=True)
    (exercises / ".hidden").mkdir()
    _ = (exercises / "notes").write_text("", encoding="utf-8")

    assert resolve_exercise_dir(exercises, "bob") == exercises / "bob"
    assert resolve_exercise_dir(exercises, ".hidden") is None
    assert resolve_exercise_dir(exercises, "notes") is None
    assert resolve_exercise_dir(exercises, "leap") is None
    assert resolve_exercise_dir(exercises, "") is None


def test_resolve_exercise_dir_without_exercises_directory(tmp_path: Path) -> None:
    assert resolve_exercise_dir(tmp_path / "exercises", "bob") is None


def test_find_all_files_walks_nested_directories(tmp_path: Path) -> None:
    root = tmp_path / "clock"
    (root / "src" / "main" / "java").mkdir(parents=True)
    (root / ".meta").mkdir()
    for relative in ("README.md", "src/main/java/Clock.java", ".meta/example.go"):
        _ = (root / relative).write_text("", encoding="utf-8")

    assert find_all_files(root) == [".meta/example.go", "README.md", "src/main/java/Clock.java"]


def test_find_all_files_empty_directory(tmp_path: Path) -> None:
    assert find_all_files(tmp_path) == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_find_all_files_does_not_follow_symlinks(tmp_path: Path) -> None:
    root = tmp_path / "bob"
    root.mkdir()
    _ = (root / "bob.go").write_text("", encoding="utf-8")
    (root / "loop").symlink_to(root, target_is_directory=True)

    assert find_all_files(root) == ["bob.go", "loop"]


def test_find_all_files_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(TrackReadError):
        _ = find_all_files(tmp_path / "absent")


def test_resolve_exercise_dir_never_leaves_exercises_directory(tmp_path: Path) -> None:
    exercises = tmp_path / "exercises"
    exercises.mkdir()
    outside = tmp_path / "outside" / "bob"
    outside.mkdir(parents=True)

    assert resolve_exercise_dir(exercises, str(outside)) is None
    assert resolve_exercise_dir(exercises, outside.anchor) is None


def _failing_is_symlink(name: str) -> Callable[[Path], bool]:
    original = Path.is_symlink

    def is_symlink(self: Path) -> bool:
        if self.name == name:
            raise PermissionError(13, "Permission denied", str(self))
        return original(self)

    return is_symlink


def test_find_all_files_wraps_entry_stat_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root = tmp_path / "bob"
    (root / "locked").mkdir(parents=True)
    _ = (root / "locked" / "example.go").write_text("", encoding="utf-8")
    monkeypatch.setattr(Path, "is_symlink", _failing_is_symlink("example.go"))

    with pytest.raises(TrackReadError) as excinfo:
        _ = find_all_files(root)
    assert excinfo.value.path == root / "locked" / "example.go"
    assert isinstance(excinfo.value.error, PermissionError)

