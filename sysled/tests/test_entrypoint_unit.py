from __future__ import annotations

import errno
import logging
from pathlib import Path

import pytest

from sysled.cli import entrypoint


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def test_status_line(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    make_led("led0", brightness=4, max_brightness=8, trigger="none [timer]")

    assert entrypoint.led_main(["led0"]) == 0
    assert capsys.readouterr().out == "4/8\ttrigger:timer\n"


def test_set_brightness_trigger_and_colors(make_led) -> None:
    led_dir = make_led("rgb:status", colors=["red", "green", "blue"])

    assert entrypoint.led_main(["-t", "heartbeat", "rgb:status", "200", "1", "2", "3"]) == 0

    assert _read(led_dir / "trigger") == "heartbeat\n"
    assert _read(led_dir / "brightness") == "200\n"
    assert _read(led_dir / "multi_intensity") == " 1 2 3\n"


def test_colors_only_leaves_brightness_alone(make_led) -> None:
    led_dir = make_led("rgb:status", brightness=9, colors=["red", "green"])

    assert entrypoint.led_main(["-c", "rgb:status", "5", "6"]) == 0

    assert _read(led_dir / "brightness") == "9\n"
    assert _read(led_dir / "multi_intensity") == " 5 6\n"


def test_wrong_color_count_writes_nothing(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    led_dir = make_led("rgb:status", brightness=9, colors=["red", "green", "blue"])

    assert entrypoint.led_main(["-t", "timer", "rgb:status", "10", "1", "2"]) == 1

    assert "Error: Invalid number of color values" in capsys.readouterr().err
    assert _read(led_dir / "brightness") == "9\n"
    assert _read(led_dir / "trigger") == "[none] timer heartbeat\n"


def test_unknown_led_fails(leds_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert entrypoint.led_main(["missing"]) == 1
    assert "Error: No such device: missing" in capsys.readouterr().err


def test_path_like_led_name_fails(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    make_led("led0")

    assert entrypoint.led_main(["../leds/led0"]) == 1
    assert "No such device" in capsys.readouterr().err


def test_permission_denied_is_reported(
    make_led, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    led_dir = make_led("led0")
    original_stat = Path.stat

    def _stat(self, *args, **kwargs):
        if self == led_dir:
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return original_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", _stat)

    assert entrypoint.led_main(["led0"]) == 1
    assert "Permission denied" in capsys.readouterr().err


def test_write_failure_is_reported(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    led_dir = make_led("led0", brightness=None)
    (led_dir / "brightness").mkdir()

    assert entrypoint.led_main(["led0", "1"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert str(led_dir / "brightness") in err


def test_info_report(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    make_led("led0", brightness=1, max_brightness=10, trigger="[none] timer")

    assert entrypoint.led_main(["-i", "led0"]) == 0

    out = capsys.readouterr().out
    assert "Name          : led0\n" in out
    assert "Brightness    :  1\n" in out
    assert "Triggers      : [none] timer\n" in out


def test_info_color_mismatch_prints_no_report(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    make_led("rgb:status", colors=["red", "green", "blue"], intensity=[1, 2])

    assert entrypoint.led_main(["--info", "rgb:status"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Cannot get color values of rgb:status" in captured.err


def test_list_option(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    make_led("led0", brightness=1, max_brightness=1, trigger="[none]")

    assert entrypoint.led_main(["--list"]) == 0
    assert capsys.readouterr().out == "NAME CUR/MAX TRIGGER\nled0 1/1     none\n"


def test_list_with_extra_argument_exits_one(leds_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        entrypoint.led_main(["-l", "led0"])
    assert excinfo.value.code == 1
    assert "Too many arguments" in capsys.readouterr().err


def test_lsled_table_and_names(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    make_led("mmc0::", trigger="none [mmc0]")
    make_led("led0")

    assert entrypoint.lsled_main([]) == 0
    table = capsys.readouterr().out.splitlines()
    assert table[0].split() == ["NAME", "CUR/MAX", "TRIGGER"]
    assert [line.split()[0] for line in table[1:]] == ["led0", "mmc0::"]

    assert entrypoint.lsled_main(["-n"]) == 0
    assert capsys.readouterr().out == "led0\nmmc0::\n"


def test_lsled_lists_entries_that_cannot_be_opened(make_led, leds_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    make_led("led0")
    (leds_root / "stray").write_text("x", encoding="utf-8")

    assert entrypoint.lsled_main([]) == 0
    table = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in table[1:]] == ["led0", "stray"]
    assert table[2].split() == ["stray", "-/-", "-"]

    assert entrypoint.lsled_main(["-n"]) == 0
    assert capsys.readouterr().out == "led0\nstray\n"


def test_lsled_without_leds(leds_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert entrypoint.lsled_main(["--names"]) == 0
    assert capsys.readouterr().out == ""


def test_main_dispatches_on_program_name(make_led, capsys: pytest.CaptureFixture[str]) -> None:
    make_led("led0", brightness=2, max_brightness=3)

    assert entrypoint.main(["/usr/bin/lsled", "-n"]) == 0
    assert capsys.readouterr().out == "led0\n"

    assert entrypoint.main(["/usr/bin/util-led", "led0"]) == 0
    assert capsys.readouterr().out == "2/3\n"


def test_debug_logging_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setenv("SYSLED_DEBUG", "1")

    entrypoint.configure_logging()

    assert calls and calls[0]["level"] == logging.DEBUG
