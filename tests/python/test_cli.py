"""End-to-end tests for the command line front end."""

import json
import logging

import pytest

from audio_switcher.exceptions import InvalidArgument
from audio_switcher.main import main, parse_device_id, parse_index
from audio_switcher.models import Direction

IN = Direction.INPUT
OUT = Direction.OUTPUT


def run(capsys, argv, hardware, environ=None):
    code = main(argv, hardware=hardware, environ=environ or {})
    return code, capsys.readouterr().out


class TestList:
    """Tests for the list command."""

    def test_prints_items(self, capsys, studio_hardware):
        code, out = run(capsys, ["list", "output"], studio_hardware)
        assert code == 0
        data = json.loads(out)
        assert [item["uid"] for item in data["items"]] == [
            "MacBook Pro Speakers",
            "AirPods Pro",
            "Studio Display Speakers",
        ]
        assert data["items"][0] == {
            "title": "MacBook Pro Speakers",
            "uid": "MacBook Pro Speakers",
            "autocomplete": "MacBook Pro Speakers",
            "arg": "73",
            "icon": {"path": "./icons/output_selected.png"},
        }
        assert data["items"][1]["icon"]["path"] == "./icons/output.png"

    def test_aliases_from_favorites(self, capsys, studio_hardware):
        environ = {"outputs": "AirPods Pro;Pods"}
        _, out = run(capsys, ["list", "output"], studio_hardware, environ)
        titles = [item["title"] for item in json.loads(out)["items"]]
        assert titles == ["MacBook Pro Speakers", "Pods", "Studio Display Speakers"]

    def test_blocklist_argument_overrides_environment(self, capsys, studio_hardware):
        environ = {"ignorelist": "AirPods Pro"}
        _, out = run(
            capsys,
            ["list", "output", "Studio Display Speakers"],
            studio_hardware,
            environ,
        )
        uids = [item["uid"] for item in json.loads(out)["items"]]
        assert uids == ["MacBook Pro Speakers", "AirPods Pro"]

    def test_blocklist_from_environment(self, capsys, studio_hardware):
        environ = {"ignorelist": "AirPods Pro\nMacBook Pro Microphone"}
        _, out = run(capsys, ["list", "input"], studio_hardware, environ)
        assert json.loads(out) == {"items": []}

    def test_icons_dir(self, capsys, studio_hardware):
        _, out = run(capsys, ["list", "input"], studio_hardware, {"icons_dir": "img"})
        assert json.loads(out)["items"][0]["icon"]["path"] == "img/input_selected.png"


class TestSwitchById:
    """Tests for the switch_by_id command."""

    def test_switches(self, capsys, studio_hardware):
        code, out = run(capsys, ["switch_by_id", "output", "102"], studio_hardware)
        assert code == 0
        assert out == "Studio Display Speakers\n"
        assert studio_hardware.set_calls == [(OUT, 102)]

    def test_malformed_id(self, capsys, studio_hardware):
        code, out = run(capsys, ["switch_by_id", "output", "speakers"], studio_hardware)
        assert code == 2
        assert out == ""
        assert studio_hardware.set_calls == []

    def test_rejected_id(self, capsys, studio_hardware):
        code, out = run(capsys, ["switch_by_id", "output", "4242"], studio_hardware)
        assert code == 3
        assert out == ""

    def test_sync_abort_reports_error(self, capsys, studio_hardware):
        studio_hardware.fail_system_output = True
        environ = {"sync_sound_effects_output": "1"}
        code, out = run(capsys, ["switch_by_id", "output", "91"], studio_hardware, environ)
        assert code == 3
        assert out == ""

    def test_sync_ignore_prints_device(self, capsys, studio_hardware):
        studio_hardware.fail_system_output = True
        environ = {
            "sync_sound_effects_output": "1",
            "sync_sound_effects_failure": "ignore",
        }
        code, out = run(capsys, ["switch_by_id", "output", "91"], studio_hardware, environ)
        assert code == 0
        assert out == "AirPods Pro\n"


class TestSwitchByName:
    """Tests for the switch_by_name command."""

    def test_list_argument(self, capsys, studio_hardware):
        code, out = run(
            capsys,
            ["switch_by_name", "output", "1", "MacBook Pro Speakers\nAirPods Pro"],
            studio_hardware,
        )
        assert code == 0
        assert out == "AirPods Pro\n"
        assert studio_hardware.set_calls == [(OUT, 91)]

    def test_favorites_fallback_uses_name_portion(self, capsys, studio_hardware):
        environ = {"inputs": "AirPods Pro;Pods\nMacBook Pro Microphone;Laptop"}
        code, out = run(capsys, ["switch_by_name", "input", "0"], studio_hardware, environ)
        assert code == 0
        assert out == "AirPods Pro\n"

    def test_index_out_of_range(self, capsys, studio_hardware):
        code, out = run(
            capsys, ["switch_by_name", "output", "2", "a\nb"], studio_hardware
        )
        assert code == 5
        assert out == ""

    def test_invalid_index(self, capsys, studio_hardware):
        code, _ = run(capsys, ["switch_by_name", "output", "first", "a"], studio_hardware)
        assert code == 2

    def test_device_not_connected(self, capsys, studio_hardware):
        code, _ = run(capsys, ["switch_by_name", "output", "0", "HDMI"], studio_hardware)
        assert code == 4
        assert studio_hardware.set_calls == []


class TestOtherCommands:
    """Tests for print_device_names, rotate_favorites and current."""

    def test_print_device_names(self, capsys, studio_hardware):
        code, out = run(capsys, ["print_device_names", "input"], studio_hardware)
        assert code == 0
        assert out == "MacBook Pro Microphone\nAirPods Pro\n"

    def test_rotate_favorites(self, capsys, studio_hardware):
        environ = {"outputs": "MacBook Pro Speakers\nHDMI\nStudio Display Speakers;Display"}
        code, out = run(capsys, ["rotate_favorites", "output"], studio_hardware, environ)
        assert code == 0
        assert out == "Studio Display Speakers\n"

    def test_rotate_without_favorites(self, capsys, studio_hardware):
        code, out = run(capsys, ["rotate_favorites", "output"], studio_hardware)
        assert code == 6
        assert out == ""

    def test_rotate_all_unavailable(self, capsys, studio_hardware, caplog):
        with caplog.at_level(logging.ERROR):
            code, _ = run(
                capsys, ["rotate_favorites", "input"], studio_hardware, {"inputs": "HDMI"}
            )
        assert code == 7
        assert "[NO_AVAILABLE_DEVICE]" in caplog.text

    def test_current(self, capsys, studio_hardware):
        code, out = run(capsys, ["current", "input"], studio_hardware)
        assert code == 0
        assert out == "MacBook Pro Microphone\n"

    def test_invalid_configuration(self, capsys, studio_hardware):
        environ = {"sync_sound_effects_failure": "maybe"}
        code, _ = run(capsys, ["current", "input"], studio_hardware, environ)
        assert code == 2


class TestUsage:
    """Tests for argument errors handled by argparse."""

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["list"],
            ["volume", "output"],
            ["list", "speakers"],
            ["switch_by_id", "output"],
        ],
    )
    def test_usage_error_exits_non_zero(self, argv, studio_hardware):
        with pytest.raises(SystemExit) as exc_info:
            main(argv, hardware=studio_hardware, environ={})
        assert exc_info.value.code == 2


class TestArgumentParsing:
    """Tests for parse_device_id() and parse_index()."""

    def test_device_id(self):
        assert parse_device_id("73") == 73
        assert parse_device_id(" 4294967295 ") == 4294967295

    @pytest.mark.parametrize("raw", ["", "-1", "7.3", "0x49", "4294967296"])
    def test_device_id_invalid(self, raw):
        with pytest.raises(InvalidArgument):
            parse_device_id(raw)

    def test_index(self):
        assert parse_index("2") == 2
        assert parse_index("-1") == -1

    def test_index_invalid(self):
        with pytest.raises(InvalidArgument):
            parse_index("one")
