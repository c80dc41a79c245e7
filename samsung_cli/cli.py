#!/usr/bin/env python3
"""Samsung Galaxy Book control CLI

Reads and sets hardware features exposed by the samsung-galaxybook
kernel driver through sysfs attributes:

- Battery charge threshold.
- Fan speed.
- Platform performance profile.
- Camera/microphone recording permission.
- Keyboard backlight level.
- Power on when the lid is opened.
- USB charging while powered off.

Paths that vary between driver versions are resolved once at startup.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ConfigManager, find_config_file
from .dispatcher import PROGRAM, build_registry, dispatch
from .errors import SamsungCliError
from .resolver import resolve_paths

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(log_level_str: str = "WARNING", log_file_path: Optional[str] = None):
    """Configure logging to stderr and, when given, to a file."""
    log_level = getattr(logging, log_level_str.upper(), logging.WARNING)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)s] %(module)s: %(message)s',
        datefmt='%H:%M:%S',
        handlers=handlers
    )
    logging.debug("Logging initialized at level %s", log_level_str.upper())


def parse_args(argv: Optional[List[str]] = None):
    """Parse global options; the command and its arguments are kept verbatim."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="CLI tool to control Samsung Galaxy Book features. "
                    f"Run '{PROGRAM} help' for the list of commands.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML configuration file. If not provided, searches in standard locations."
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Set the logging level (default: from configuration, else WARNING)."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="<command> <subcommand> [value]"
    )
    # Unknown leading options are left for the dispatcher to report.
    args, unknown = parser.parse_known_args(argv)
    args.command = unknown + args.command
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    args = parse_args(argv)

    try:
        config = ConfigManager(find_config_file(args.config))
    except (OSError, SamsungCliError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        setup_logging(args.log_level or config.log_level, config.log_file)
    except OSError as e:
        print(f"Error: Could not open log file: {e}", file=sys.stderr)
        return 1

    if config.config_path:
        logging.debug("Using configuration from: %s", config.config_path)

    paths = resolve_paths(config)
    registry = build_registry(paths)
    return dispatch(registry, args.command)


if __name__ == "__main__":
    sys.exit(main())
