import pytest

from samsung_cli.dispatcher import build_registry, dispatch

COMMAND_NAMES = [
    "power", "fan", "perf", "record", "kbd", "start-on-lid-open", "usb-charge", "help",
]


@pytest.fixture
def registry(sysfs):
    return build_registry(sysfs)


def test_registry_holds_every_command_with_help_last(registry) -> None:
    assert list(registry) == COMMAND_NAMES


def test_registry_is_read_only(registry) -> None:
    with pytest.raises(TypeError):
        registry["extra"] = registry["help"]


def test_help_lists_every_command_once(registry, capsys) -> None:
    assert dispatch(registry, ["help"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Usage: samsung-cli <command> [<args>]\n")
    for name in COMMAND_NAMES:
        usage = registry[name].describe_usage()
        assert out.count(usage) == 1
        first_line = usage.splitlines()[0]
        assert out.count(first_line) == 1


def test_no_arguments_prints_help_and_fails(registry, capsys) -> None:
    assert dispatch(registry, []) == 1

    out = capsys.readouterr().out
    assert "Commands:" in out
    assert "  help          Show this help message" in out


def test_unknown_command_prints_error_and_help(registry, capsys) -> None:
    assert dispatch(registry, ["bluetooth", "read"]) == 1

    captured = capsys.readouterr()
    assert captured.err == "Error: Unknown command 'bluetooth'\n"
    assert "Commands:" in captured.out


def test_success_maps_to_zero(registry, capsys) -> None:
    assert dispatch(registry, ["fan", "read"]) == 0
    assert capsys.readouterr().out == "Current fan speed: 2400 RPM\n"


def test_failure_maps_to_one(registry, capsys) -> None:
    assert dispatch(registry, ["kbd", "set", "9"]) == 1
