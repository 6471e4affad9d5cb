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

"""Schema command: emit the JSON schema for ``config.json``."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import TYPE_CHECKING

from configlet.cli.helpers import echo, register_argument
from configlet.manifest import manifest_json_schema

if TYPE_CHECKING:
    from collections.abc import Sequence

    from configlet.cli.types import SubparserCollection


def register_schema_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Register the `configlet schema` command.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    schema = subparsers.add_parser(
        "schema",
        help="Emit the JSON schema describing config.json",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        schema,
        "--output",
        type=Path,
        default=None,
        help="Write the schema to a path instead of stdout",
    )
    register_argument(
        schema,
        "--indent",
        type=int,
        default=2,
        help="Indentation level for JSON output",
    )


def execute_schema(args: argparse.Namespace) -> int:
    """Execute the `configlet schema` command."""
    schema_text = json.dumps(manifest_json_schema(), indent=args.indent)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        _ = args.output.write_text(schema_text + "\n", encoding="utf-8")
    else:
        echo(schema_text)
    return 0


__all__ = ["execute_schema", "register_schema_command"]
