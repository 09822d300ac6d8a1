from __future__ import annotations

import os
from pathlib import Path

DEFAULT_LEDS_ROOT = Path("/sys/class/leds")


def hardware_allowed() -> bool:
    return os.environ.get("SYSLED_ALLOW_HARDWARE") == "1"


def debug_enabled() -> bool:
    return bool(os.environ.get("SYSLED_DEBUG"))


def sysfs_leds_root() -> Path:
    # SYSLED_SYSFS_LEDS_ROOT points the tools at a fake LED tree.
    root = os.environ.get("SYSLED_SYSFS_LEDS_ROOT")

    # Pytest runs without an explicit root see an empty tree unless
    # SYSLED_ALLOW_HARDWARE=1 is set.
    if root is None and os.environ.get("PYTEST_CURRENT_TEST") and not hardware_allowed():
        return Path("/nonexistent-sysled-test-sysfs-leds")

    return Path(root) if root else DEFAULT_LEDS_ROOT


def is_real_sysfs_path(path: Path) -> bool:
    try:
        real = os.path.realpath(str(path))
        return real.startswith("/sys/")
    except Exception:
        return False
