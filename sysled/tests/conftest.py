from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


def _hardware_opted_in() -> bool:
    return os.environ.get("SYSLED_ALLOW_HARDWARE") == "1"


# Safety default: a stray write under pytest should fail loudly instead of
# silently touching the real LED tree.
if not _hardware_opted_in():
    os.environ.setdefault("SYSLED_TEST_HARDWARE_TRIPWIRE", "1")


@pytest.fixture
def leds_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """An empty fake ``/sys/class/leds`` that the library resolves by default."""

    root = tmp_path / "sys" / "class" / "leds"
    root.mkdir(parents=True)
    monkeypatch.setenv("SYSLED_SYSFS_LEDS_ROOT", str(root))
    monkeypatch.delenv("SYSLED_DEBUG", raising=False)
    return root


@pytest.fixture
def make_led(leds_root: Path):
    """Factory creating one LED directory with the usual attribute files."""

    def _make(
        name: str,
        *,
        brightness: Optional[int] = 0,
        max_brightness: Optional[int] = 255,
        trigger: Optional[str] = "[none] timer heartbeat",
        colors: Sequence[str] = (),
        intensity: Optional[Sequence[int]] = None,
    ) -> Path:
        led_dir = leds_root / name
        led_dir.mkdir(parents=True)
        if brightness is not None:
            (led_dir / "brightness").write_text(f"{brightness}\n", encoding="utf-8")
        if max_brightness is not None:
            (led_dir / "max_brightness").write_text(f"{max_brightness}\n", encoding="utf-8")
        if trigger is not None:
            (led_dir / "trigger").write_text(f"{trigger}\n", encoding="utf-8")
        if colors:
            (led_dir / "multi_index").write_text(" ".join(colors) + "\n", encoding="utf-8")
            if intensity is None:
                intensity = [0] * len(colors)
        if intensity is not None:
            (led_dir / "multi_intensity").write_text(
                " ".join(str(v) for v in intensity) + "\n", encoding="utf-8"
            )
        return led_dir

    return _make
