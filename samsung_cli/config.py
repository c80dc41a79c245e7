#!/usr/bin/env python3
"""
Configuration manager for the Galaxy Book control tool.

Loads optional path overrides from a YAML file. Every setting has a
built-in default matching the samsung-galaxybook driver, so the tool
works without any configuration file at all.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError


DEFAULT_POWER_PATH = "/sys/class/power_supply/BAT1/charge_control_end_threshold"
DEFAULT_FAN_PATH = "/sys/bus/acpi/devices/PNP0C0B:00/fan_speed_rpm"
DEFAULT_PLATFORM_PROFILE_PATH = "/sys/firmware/acpi/platform_profile"
DEFAULT_PLATFORM_PROFILE_CHOICES_PATH = "/sys/firmware/acpi/platform_profile_choices"
DEFAULT_KBD_BACKLIGHT_PATH = "/sys/class/leds/samsung-galaxybook::kbd_backlight/brightness"

DEFAULT_UDEV_ROOT = "/dev/samsung-galaxybook"
DEFAULT_PLATFORM_DRIVER_ROOT = "/sys/bus/platform/drivers/samsung-galaxybook"
DEFAULT_ACPI_DEVICE_ROOT = "/sys/bus/acpi/devices/SCAI:00"
DEFAULT_DEVICE_PREFIX = "SAM"


class ConfigManager:
    """
    Read-only access to the tool configuration.

    Values missing from the YAML file fall back to the driver defaults.
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the configuration manager, loading config_path if given."""
        self.config_path = config_path
        self._config = {}

        if config_path:
            self.reload()

    def reload(self) -> None:
        """Reload configuration from the YAML file."""
        if not self.config_path or not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error loading configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Error loading configuration: {self.config_path} must contain a mapping"
            )
        self._config = data

    @property
    def power_path(self) -> str:
        """Battery charge end threshold attribute."""
        return self._config.get("power_path", DEFAULT_POWER_PATH)

    @property
    def fan_path(self) -> str:
        """Fan speed attribute (RPM)."""
        return self._config.get("fan_path", DEFAULT_FAN_PATH)

    @property
    def platform_profile_path(self) -> str:
        return self._config.get("platform_profile_path", DEFAULT_PLATFORM_PROFILE_PATH)

    @property
    def platform_profile_choices_path(self) -> str:
        return self._config.get(
            "platform_profile_choices_path", DEFAULT_PLATFORM_PROFILE_CHOICES_PATH
        )

    @property
    def kbd_backlight_path(self) -> str:
        """Keyboard backlight brightness attribute (0-3)."""
        return self._config.get("kbd_backlight_path", DEFAULT_KBD_BACKLIGHT_PATH)

    @property
    def udev_root(self) -> str:
        """Directory of convenience symlinks created by the udev rule."""
        return self._config.get("udev_root", DEFAULT_UDEV_ROOT)

    @property
    def platform_driver_root(self) -> str:
        """Platform driver directory holding one entry per bound device."""
        return self._config.get("platform_driver_root", DEFAULT_PLATFORM_DRIVER_ROOT)

    @property
    def acpi_device_root(self) -> str:
        """ACPI device directory used when nothing else is found."""
        return self._config.get("acpi_device_root", DEFAULT_ACPI_DEVICE_ROOT)

    @property
    def device_prefix(self) -> str:
        """Name prefix of device entries under the platform driver root."""
        return self._config.get("device_prefix", DEFAULT_DEVICE_PREFIX)

    @property
    def log_file(self) -> Optional[str]:
        """Optional log file; logs go to stderr only when unset."""
        return self._config.get("log_file")

    @property
    def log_level(self) -> str:
        return self._config.get("log_level", "WARNING")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by key."""
        return self._config.get(key, default)


def find_config_file(specified_path: Optional[str] = None) -> Optional[str]:
    """
    Find the configuration file.

    An explicitly specified path is returned as-is so that a missing file
    is reported by ConfigManager. Otherwise searches the package directory,
    /etc and the user's config directory, returning None when nothing exists.
    """
    if specified_path:
        return specified_path

    package_dir = Path(__file__).resolve().parent

    search_paths = [
        package_dir / "config.yaml",
        Path("/etc/samsung-cli/config.yaml"),
        Path.home() / ".config/samsung-cli/config.yaml",
    ]

    for path in search_paths:
        if path.exists():
            return str(path)

    return None
