#!/usr/bin/env python3
"""
Single-line reads and writes of sysfs attributes.

No buffering and no retries: each call makes exactly one attempt and
raises a SamsungCliError subclass describing why it failed.
"""

import logging
import os

from .errors import PathUnreadableError, PathUnwritableError, PermissionDeniedError


def read_attribute(path: str) -> str:
    """
    Read the first line of an attribute.

    Returns:
        The line without its trailing newline.

    Raises:
        PathUnreadableError: the attribute could not be opened or read.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = f.readline()
    except (OSError, UnicodeDecodeError) as exc:
        logging.debug("Read of %s failed: %s", path, exc)
        raise PathUnreadableError(path) from exc

    value = value.rstrip("\n")
    logging.debug("%s → %r", path, value)
    return value


def write_attribute(path: str, value: str) -> None:
    """
    Write value to an attribute, exactly as given and without a newline.

    Raises:
        PermissionDeniedError: the process lacks write access to path.
        PathUnwritableError: opening or writing failed anyway.
    """
    if not os.access(path, os.W_OK):
        raise PermissionDeniedError(path)

    try:
        # sysfs reports a rejected value on write or on close.
        with open(path, "w", encoding="utf-8") as f:
            f.write(value)
    except OSError as exc:
        logging.debug("Write of %r to %s failed: %s", value, path, exc)
        raise PathUnwritableError(path) from exc

    logging.debug("%s ← %r", path, value)
