#!/usr/bin/env python3
"""
Feature commands.

Each command is an immutable value pairing a usage text with a run
function. Run functions validate their arguments completely before
touching any attribute and signal failure by raising SamsungCliError.
"""

import logging
import re
import sys
from dataclasses import dataclass
from typing import Callable, Dict, Sequence

from .attributes import read_attribute, write_attribute
from .errors import (
    InvalidValueError,
    MissingArgumentError,
    SamsungCliError,
    UnknownSubcommandError,
)
from .resolver import FeaturePaths

FALSE_TOKENS = ("0", "off", "false", "no")
TRUE_TOKENS = ("1", "on", "true", "yes")

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


@dataclass(frozen=True)
class Command:
    """A named command: usage text plus the function that runs it."""
    name: str
    usage: str
    run: Callable[[Sequence[str]], None]

    def execute(self, args: Sequence[str]) -> bool:
        """Run the command, reporting any failure on stderr."""
        try:
            self.run(args)
        except SamsungCliError as exc:
            logging.debug("%s failed: %s", self.name, type(exc).__name__)
            print(f"Error: {exc}", file=sys.stderr)
            return False
        return True

    def describe_usage(self) -> str:
        return self.usage


###############################################################################
# Validation
###############################################################################

def parse_int_in_range(value: str, low: int, high: int) -> int:
    """Parse a decimal integer and check low <= value <= high."""
    if not _INTEGER.fullmatch(value):
        raise InvalidValueError(f"Invalid value '{value}'")
    try:
        number = int(value)
    except ValueError as exc:
        # Digit strings beyond the interpreter conversion limit.
        raise InvalidValueError(f"Invalid value '{value}'") from exc
    if number < low or number > high:
        raise InvalidValueError(f"Value must be between {low} and {high}")
    return number


def normalize_toggle(value: str) -> str:
    """Map an on/off token to the "0"/"1" the driver expects."""
    if value in FALSE_TOKENS:
        return "0"
    if value in TRUE_TOKENS:
        return "1"
    raise InvalidValueError("Value must be one of: 0/1, on/off, true/false, yes/no")


def describe_toggle(stored: str) -> str:
    return "Enabled" if stored == "1" else "Disabled"


def _subcommand(args: Sequence[str], label: str, choices: Sequence[str]) -> str:
    """Return args[1], checking it is one of choices."""
    if len(args) < 2:
        if len(choices) > 2:
            expected = ", ".join(f"'{c}'" for c in choices[:-1]) + f", or '{choices[-1]}'"
        else:
            expected = " or ".join(f"'{c}'" for c in choices)
        raise MissingArgumentError(f"Missing {label} subcommand. Use {expected}.")

    subcommand = args[1]
    if subcommand not in choices:
        raise UnknownSubcommandError(f"Unknown {label} subcommand '{subcommand}'")
    return subcommand


def _value(args: Sequence[str], name: str, what: str = "value") -> str:
    if len(args) < 3:
        raise MissingArgumentError(f"Missing {what} for '{name} set'")
    return args[2]


###############################################################################
# Command factories
###############################################################################

def _range_command(name: str, label: str, path: str, low: int, high: int,
                   read_message: str, set_message: str, usage: str) -> Command:
    """Integer attribute with read/set; messages are formatted with {value}."""
    def run(args: Sequence[str]) -> None:
        if _subcommand(args, label, ("read", "set")) == "read":
            print(read_message.format(value=read_attribute(path)))
            return
        number = parse_int_in_range(_value(args, name), low, high)
        write_attribute(path, str(number))
        print(set_message.format(value=number))

    return Command(name, usage, run)


def _toggle_command(name: str, label: str, path: str, title: str,
                    setting: str, usage: str) -> Command:
    """Boolean attribute accepting on/off tokens, stored as "0"/"1"."""
    def run(args: Sequence[str]) -> None:
        if _subcommand(args, label, ("read", "set")) == "read":
            print(f"{title}: {describe_toggle(read_attribute(path))}")
            return
        normalized = normalize_toggle(_value(args, name))
        write_attribute(path, normalized)
        print(f"Set {setting} to {describe_toggle(normalized)}")

    return Command(name, usage, run)


def fan_command(path: str) -> Command:
    def run(args: Sequence[str]) -> None:
        _subcommand(args, "fan", ("read",))
        print(f"Current fan speed: {read_attribute(path)} RPM")

    return Command("fan", "  fan read      Read current fan speed in RPM", run)


def performance_command(profile_path: str, choices_path: str) -> Command:
    def run(args: Sequence[str]) -> None:
        subcommand = _subcommand(args, "performance", ("read", "set", "list"))
        if subcommand == "read":
            print(f"Current performance mode: {read_attribute(profile_path)}")
        elif subcommand == "list":
            print(f"Available performance modes: {read_attribute(choices_path)}")
        else:
            mode = _value(args, "perf", "mode")
            if mode not in read_attribute(choices_path):
                raise InvalidValueError(f"Invalid performance mode '{mode}'")
            write_attribute(profile_path, mode)
            print(f"Set performance mode to {mode}")

    usage = ("  perf read     Read current performance mode\n"
             "  perf set <mode>  Set performance mode (low-power/balanced/performance)\n"
             "  perf list     List available performance modes")
    return Command("perf", usage, run)


def build_feature_commands(paths: FeaturePaths) -> Dict[str, Command]:
    """Create every feature command, keyed by name in canonical order."""
    commands = [
        _range_command(
            "power", "power", paths.power, 0, 100,
            "Current charge threshold: {value}%",
            "Set charge threshold to {value}%",
            "  power read    Read the charge threshold\n"
            "  power set <value>  Set the charge threshold (0-100)",
        ),
        fan_command(paths.fan),
        performance_command(paths.platform_profile, paths.platform_profile_choices),
        _toggle_command(
            "record", "recording", paths.allow_recording,
            "Recording permission", "recording permission",
            "  record read   Read recording permission status\n"
            "  record set <value>  Set recording permission (0/1, on/off, true/false, yes/no)",
        ),
        _range_command(
            "kbd", "keyboard", paths.kbd_backlight, 0, 3,
            "Keyboard backlight level: {value}",
            "Set keyboard backlight level to {value}",
            "  kbd read      Read keyboard backlight level\n"
            "  kbd set <0-3> Set keyboard backlight level (0=off, 1-3=brightness)\n"
            "               Note: Backlight may be affected by ambient light sensor\n"
            "               and GNOME's automatic backlight control",
        ),
        _toggle_command(
            "start-on-lid-open", "start-on-lid-open", paths.start_on_lid_open,
            "Start on lid open", "start on lid open",
            "  start-on-lid-open read   Read start on lid open status\n"
            "  start-on-lid-open set <value>  Set start on lid open (0/1, on/off, true/false, yes/no)",
        ),
        _toggle_command(
            "usb-charge", "usb-charge", paths.usb_charge,
            "USB charge", "USB charge",
            "  usb-charge read   Read USB charge status\n"
            "  usb-charge set <value>  Set USB charge (0/1, on/off, true/false, yes/no)",
        ),
    ]
    return {command.name: command for command in commands}
