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

"""Cross-version compatibility helpers for configlet.

Modules that need ``StrEnum`` or typing constructs newer than Python 3.10
import them from here instead of branching on the interpreter version.
"""

from __future__ import annotations

from .enums import StrEnum
from .typing import TypedDict, Unpack, assert_never, override

__all__ = [
    "StrEnum",
    "TypedDict",
    "Unpack",
    "assert_never",
    "override",
]
