from pathlib import Path

import pytest

from samsung_cli.resolver import FeaturePaths


@pytest.fixture
def sysfs(tmp_path: Path) -> FeaturePaths:
    """Fake attribute files with typical driver contents."""
    files = {
        "power": "80\n",
        "fan": "2400\n",
        "platform_profile": "balanced\n",
        "platform_profile_choices": "low-power quiet balanced performance\n",
        "kbd_backlight": "1\n",
        "allow_recording": "1\n",
        "start_on_lid_open": "0\n",
        "usb_charge": "1\n",
    }
    for name, content in files.items():
        (tmp_path / name).write_text(content)
    return FeaturePaths(**{name: str(tmp_path / name) for name in files})
