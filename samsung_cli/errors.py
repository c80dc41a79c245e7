#!/usr/bin/env python3
"""
Error types raised by the command handlers and the attribute accessor.

Every error carries a human-readable message; the dispatcher prints it
as ``Error: <message>`` and turns it into a failing exit status.
"""


class SamsungCliError(Exception):
    """Base class for all errors reported to the user."""


class ConfigError(SamsungCliError):
    """Configuration file could not be parsed."""


class MissingArgumentError(SamsungCliError):
    """Subcommand or value omitted."""


class UnknownCommandError(SamsungCliError):
    """First argument names no registered command."""

    def __init__(self, name: str):
        super().__init__(f"Unknown command '{name}'")
        self.name = name


class UnknownSubcommandError(SamsungCliError):
    """Subcommand not supported by the feature."""


class InvalidValueError(SamsungCliError):
    """Value failed the feature's domain validation."""


class PathUnreadableError(SamsungCliError):
    """Attribute could not be opened for reading."""

    def __init__(self, path: str):
        super().__init__(f"Could not open {path}")
        self.path = path


class PathUnwritableError(SamsungCliError):
    """Attribute could not be opened or written despite passing the access check."""

    def __init__(self, path: str):
        super().__init__(f"Could not write to {path}")
        self.path = path


class PermissionDeniedError(SamsungCliError):
    """Write access check failed before opening the attribute."""

    def __init__(self, path: str):
        super().__init__("Permission denied. Run with sudo.")
        self.path = path
