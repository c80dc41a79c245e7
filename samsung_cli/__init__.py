"""
Samsung Galaxy Book control package.

Command-line access to the hardware features exposed by the
samsung-galaxybook kernel driver through sysfs attributes.
"""

__version__ = "0.1.0"

# Core components
from .config import ConfigManager
from .resolver import FeaturePaths, resolve_feature_path, resolve_paths
from .attributes import read_attribute, write_attribute

# Commands
from .commands import Command, build_feature_commands
from .dispatcher import build_registry, dispatch

__all__ = [
    "ConfigManager",
    "FeaturePaths", "resolve_feature_path", "resolve_paths",
    "read_attribute", "write_attribute",
    "Command", "build_feature_commands",
    "build_registry", "dispatch",
    "__version__"
]
