#!/usr/bin/env python3
"""
Command registry and dispatch.

The registry is built in one pass: feature commands first, then the
help command as a closure over the finished feature set.
"""

import sys
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from .commands import Command, build_feature_commands
from .errors import UnknownCommandError
from .resolver import FeaturePaths

PROGRAM = "samsung-cli"
HELP_USAGE = "  help          Show this help message"


def make_help_command(commands: Tuple[Command, ...]) -> Command:
    """Help command listing the usage of commands followed by its own."""
    def run(args: Sequence[str]) -> None:
        lines = [
            f"Usage: {PROGRAM} <command> [<args>]",
            "CLI tool to control Samsung Galaxy Book features.",
            "",
            "Commands:",
        ]
        lines.extend(command.describe_usage() for command in commands)
        lines.append(HELP_USAGE)
        print("\n".join(lines))

    return Command("help", HELP_USAGE, run)


def build_registry(paths: FeaturePaths) -> Mapping[str, Command]:
    """Read-only mapping of every command name, help included, to its Command."""
    features = build_feature_commands(paths)
    help_command = make_help_command(tuple(features.values()))
    return MappingProxyType({**features, help_command.name: help_command})


def dispatch(registry: Mapping[str, Command], argv: Sequence[str]) -> int:
    """
    Route argv to its command.

    Args:
        registry: commands by name, must include "help"
        argv: command name, subcommand and value, without the program name

    Returns:
        Process exit status: 0 on success, 1 on any failure.
    """
    help_command = registry["help"]
    if not argv:
        help_command.execute([])
        return 1

    command = registry.get(argv[0])
    if command is None:
        print(f"Error: {UnknownCommandError(argv[0])}", file=sys.stderr)
        help_command.execute([])
        return 1

    return 0 if command.execute(list(argv)) else 1
