#!/usr/bin/env python3
"""
Feature path resolution.

The samsung-galaxybook driver exposes some attributes in different
places depending on its version: a udev convenience directory, the
platform device directory, or the legacy ACPI device directory.
"""

import logging
import os
from dataclasses import dataclass

from .config import (
    ConfigManager,
    DEFAULT_ACPI_DEVICE_ROOT,
    DEFAULT_DEVICE_PREFIX,
    DEFAULT_PLATFORM_DRIVER_ROOT,
    DEFAULT_UDEV_ROOT,
)

ALLOW_RECORDING = "allow_recording"
START_ON_LID_OPEN = "start_on_lid_open"
USB_CHARGE = "usb_charge"


@dataclass(frozen=True)
class FeaturePaths:
    """Control file of every feature, fixed for the lifetime of the process."""
    power: str
    fan: str
    platform_profile: str
    platform_profile_choices: str
    kbd_backlight: str
    allow_recording: str
    start_on_lid_open: str
    usb_charge: str


def _readable(path: str) -> bool:
    return os.access(path, os.R_OK)


def resolve_feature_path(feature_name: str,
                         udev_root: str = DEFAULT_UDEV_ROOT,
                         driver_root: str = DEFAULT_PLATFORM_DRIVER_ROOT,
                         acpi_root: str = DEFAULT_ACPI_DEVICE_ROOT,
                         prefix: str = DEFAULT_DEVICE_PREFIX) -> str:
    """
    Locate the attribute file for feature_name.

    Candidates, first readable one wins:
    1. <udev_root>/<feature_name>
    2. <driver_root>/<entry>/<feature_name> for entries starting with prefix,
       in directory listing order
    3. <acpi_root>/<feature_name>, returned without being checked
    """
    udev_path = os.path.join(udev_root, feature_name)
    if _readable(udev_path):
        logging.debug("%s: using udev path %s", feature_name, udev_path)
        return udev_path

    try:
        entries = os.listdir(driver_root)
    except OSError as exc:
        logging.debug("%s: cannot list %s: %s", feature_name, driver_root, exc)
        entries = []

    for entry in entries:
        if not entry.startswith(prefix):
            continue
        path = os.path.join(driver_root, entry, feature_name)
        if _readable(path):
            logging.debug("%s: using platform driver path %s", feature_name, path)
            return path

    fallback = os.path.join(acpi_root, feature_name)
    logging.debug("%s: no readable candidate, falling back to %s", feature_name, fallback)
    return fallback


def resolve_paths(config: ConfigManager) -> FeaturePaths:
    """Resolve every feature path once, combining probed and configured paths."""
    def resolve(name: str) -> str:
        return resolve_feature_path(
            name,
            udev_root=config.udev_root,
            driver_root=config.platform_driver_root,
            acpi_root=config.acpi_device_root,
            prefix=config.device_prefix,
        )

    return FeaturePaths(
        power=config.power_path,
        fan=config.fan_path,
        platform_profile=config.platform_profile_path,
        platform_profile_choices=config.platform_profile_choices_path,
        kbd_backlight=config.kbd_backlight_path,
        allow_recording=resolve(ALLOW_RECORDING),
        start_on_lid_open=resolve(START_ON_LID_OPEN),
        usb_charge=resolve(USB_CHARGE),
    )
