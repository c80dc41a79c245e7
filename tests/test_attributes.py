import os
from pathlib import Path

import pytest

from samsung_cli.attributes import read_attribute, write_attribute
from samsung_cli.errors import PathUnreadableError, PathUnwritableError, PermissionDeniedError


def test_read_returns_first_line_without_newline(tmp_path: Path) -> None:
    attr = tmp_path / "platform_profile_choices"
    attr.write_text("low-power balanced performance\nsecond line\n")

    assert read_attribute(str(attr)) == "low-power balanced performance"


def test_read_missing_file_raises_unreadable(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(PathUnreadableError) as excinfo:
        read_attribute(str(missing))

    assert str(excinfo.value) == f"Could not open {missing}"


def test_read_directory_raises_unreadable(tmp_path: Path) -> None:
    with pytest.raises(PathUnreadableError):
        read_attribute(str(tmp_path))


def test_write_replaces_contents_without_newline(tmp_path: Path) -> None:
    attr = tmp_path / "brightness"
    attr.write_text("3\n")

    write_attribute(str(attr), "0")

    assert attr.read_text() == "0"


def test_write_checks_permission_before_opening(tmp_path: Path, monkeypatch) -> None:
    attr = tmp_path / "charge_control_end_threshold"
    attr.write_text("80\n")
    monkeypatch.setattr(os, "access", lambda path, mode: False)

    with pytest.raises(PermissionDeniedError) as excinfo:
        write_attribute(str(attr), "60")

    assert "Run with sudo" in str(excinfo.value)
    assert attr.read_text() == "80\n"


def test_write_open_failure_raises_unwritable(tmp_path: Path) -> None:
    # Directories pass the access check but cannot be opened for writing.
    target = tmp_path / "attr_dir"
    target.mkdir()

    with pytest.raises(PathUnwritableError) as excinfo:
        write_attribute(str(target), "1")

    assert str(excinfo.value) == f"Could not write to {target}"


def test_read_undecodable_bytes_raises_unreadable(tmp_path: Path) -> None:
    attr = tmp_path / "fan_speed_rpm"
    attr.write_bytes(b"\xff\xfe\x00\n")

    with pytest.raises(PathUnreadableError):
        read_attribute(str(attr))
