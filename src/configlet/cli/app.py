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

"""CLI entry point and orchestration for configlet commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Final

from configlet import __version__
from configlet.cli.commands import lint as lint_command
from configlet.cli.commands import schema as schema_command
from configlet.cli.helpers import echo, register_argument
from configlet.logging import LOG_FORMATS, LOG_LEVELS, configure_logging

CONFIGLET_VERSION: Final[str] = __version__

CommandHandler = Callable[[argparse.Namespace], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the configlet command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"configlet {CONFIGLET_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _ = configure_logging(
        getattr(args, "log_format", None),
        log_level=getattr(args, "log_level", None),
    )
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    return handler(args)


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    register_argument(
        common,
        "--log-format",
        choices=LOG_FORMATS,
        default=argparse.SUPPRESS,
        help="Select logging output format (default: $CONFIGLET_LOG_FORMAT or text).",
    )
    register_argument(
        common,
        "--log-level",
        choices=LOG_LEVELS,
        default=argparse.SUPPRESS,
        help="Set verbosity of logged events (default: $CONFIGLET_LOG_LEVEL or warning).",
    )
    parser = argparse.ArgumentParser(
        prog="configlet",
        parents=[common],
        description="Validate that a track's config.json agrees with its exercise directories.",
    )
    register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the configlet version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    parents = [common]
    lint_command.register_lint_command(subparsers, parents=parents)
    schema_command.register_schema_command(subparsers, parents=parents)
    return parser


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "lint": lint_command.execute_lint,
        "schema": schema_command.execute_schema,
    }


__all__ = ["main"]
