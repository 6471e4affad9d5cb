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

"""Common strategies producing exercise slugs and slug collections."""

from __future__ import annotations

import hypothesis.strategies as st

__all__ = ["disjoint_categories", "slug_sets", "slugs"]


def slugs() -> st.SearchStrategy[str]:
    """Return a strategy yielding kebab-case exercise slugs."""
    return st.from_regex(r"[a-z][a-z0-9]{0,6}(-[a-z0-9]{1,4})?", fullmatch=True)


def slug_sets(max_size: int = 6) -> st.SearchStrategy[frozenset[str]]:
    """Return a strategy yielding small sets of slugs."""
    return st.frozensets(slugs(), max_size=max_size)


@st.composite
def disjoint_categories(draw: st.DrawFn) -> tuple[list[str], list[str], list[str]]:
    """Draw ``exercises``, ``deprecated`` and ``foregone`` lists with no shared slug."""
    pool = draw(st.lists(slugs(), unique=True, max_size=12))
    labels = draw(st.lists(st.sampled_from((0, 1, 2)), min_size=len(pool), max_size=len(pool)))
    buckets: tuple[list[str], list[str], list[str]] = ([], [], [])
    for slug, label in zip(pool, labels):
        buckets[label].append(slug)
    return buckets
