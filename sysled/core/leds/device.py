from __future__ import annotations

import logging
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from ..paths import sysfs_leds_root
from ..utils.exceptions import errno_of, is_device_missing, is_permission_denied
from . import common
from .errors import InvalidLedName, LedError, LedNotFound, LedPermissionDenied, LedWriteError

logger = logging.getLogger(__name__)


def _unwrap_active(entry: str) -> Optional[str]:
    if len(entry) >= 3 and entry[0] == "[" and entry[-1] == "]":
        return entry[1:-1]
    return None


@dataclass
class LedDevice:
    """One LED class device under the sysfs LED root.

    The brightness of each individual color of a multicolor LED is:

        color_brightness = brightness * color_intensity / max_brightness

    The handle only exposes the raw values; callers combine them.
    """

    name: str
    root: Optional[Path] = None

    path: Path = field(init=False)
    brightness_path: Path = field(init=False, repr=False)
    max_brightness_path: Path = field(init=False, repr=False)
    multi_intensity_path: Path = field(init=False, repr=False)
    trigger_path: Path = field(init=False, repr=False)
    colors: tuple[str, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        if not self.name or "\x00" in self.name:
            raise InvalidLedName(self.name)

        # The name must be a bare directory entry, not an absolute or relative path.
        if "/" in self.name or self.name in (".", ".."):
            raise LedNotFound(self.name)

        root = self.root if self.root is not None else sysfs_leds_root()
        self.root = root
        self.path = root / self.name

        try:
            st = self.path.stat()
        except OSError as exc:
            raise self._lookup_error(exc) from exc
        if not stat.S_ISDIR(st.st_mode):
            raise LedNotFound(self.name, path=self.path)

        self.brightness_path = self.path / "brightness"
        self.max_brightness_path = self.path / "max_brightness"
        self.multi_intensity_path = self.path / "multi_intensity"
        self.trigger_path = self.path / "trigger"

        self.colors = self._read_multi_index()

    def _lookup_error(self, exc: OSError) -> LedError:
        if is_permission_denied(exc):
            return LedPermissionDenied(self.path, errno=errno_of(exc))
        if is_device_missing(exc):
            return LedNotFound(self.name, path=self.path)
        return LedError(f"{exc.strerror or exc}: {self.path}", errno=errno_of(exc), path=self.path)

    def _read_multi_index(self) -> tuple[str, ...]:
        multi_index = self.path / "multi_index"
        if not multi_index.exists():
            return ()
        try:
            text = multi_index.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise self._lookup_error(exc) from exc
        return tuple(text.split())

    def _write(self, path: Path, content: str) -> None:
        try:
            common.safe_write_text(path, content)
        except OSError as exc:
            logger.debug("led %s: write to %s failed: %s", self.name, path, exc)
            raise LedWriteError(path, errno_of(exc)) from exc

    def max_brightness(self) -> Optional[int]:
        """Return the maximum brightness, or None if it can't be read."""
        return common.read_unsigned(self.max_brightness_path)

    def brightness(self) -> Optional[int]:
        """Return the current brightness, or None if it can't be read."""
        return common.read_unsigned(self.brightness_path)

    def set_brightness(self, value: int) -> None:
        self._write(self.brightness_path, f"{int(value)}\n")

    def is_multicolor(self) -> bool:
        return bool(self.colors)

    def color_names(self) -> tuple[str, ...]:
        return self.colors

    def color_intensity(self) -> list[int]:
        """Return the intensity of each color, in ``color_names()`` order.

        Empty for single-color LEDs and when the attribute can't be read. A
        malformed value ends the list early; the values before it are kept.
        """

        values: list[int] = []
        if not self.colors:
            return values

        tokens = common.read_tokens(self.multi_intensity_path)
        for token in tokens or ():
            value = common.parse_unsigned(token)
            if value is None:
                logger.debug("led %s: bad multi_intensity value %r", self.name, token)
                break
            values.append(value)
        return values

    def set_color_intensity(self, values: Iterable[int]) -> None:
        """Write one intensity value per color.

        The number of values must match ``len(color_names())``; the kernel
        rejects the write otherwise.
        """

        content = "".join(f" {int(v)}" for v in values)
        self._write(self.multi_intensity_path, content + "\n")

    def triggers(self) -> set[str]:
        names: set[str] = set()
        for entry in common.read_tokens(self.trigger_path) or ():
            active = _unwrap_active(entry)
            names.add(active if active is not None else entry)
        return names

    def trigger(self) -> Optional[str]:
        """Return the active trigger.

        An empty string means the trigger list has no active entry; None means
        the trigger attribute couldn't be read.
        """

        tokens = common.read_tokens(self.trigger_path)
        if tokens is None:
            return None
        for entry in tokens:
            active = _unwrap_active(entry)
            if active is not None:
                return active
        return ""

    def set_trigger(self, name: str) -> None:
        self._write(self.trigger_path, f"{name}\n")


def led_names(*, root: Optional[Path] = None) -> set[str]:
    """Return the names of all LED devices registered under the LED root."""

    if root is None:
        root = sysfs_leds_root()

    names: set[str] = set()
    try:
        for child in root.iterdir():
            if child.name:
                names.add(child.name)
    except OSError as exc:
        logger.debug("Cannot list LED devices in %s: %s", root, exc)
    return names
