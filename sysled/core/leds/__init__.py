"""LED class devices (``/sys/class/leds``)."""

from .device import LedDevice, led_names
from .errors import (
    ColorValuesError,
    InvalidLedName,
    LedError,
    LedErrorKind,
    LedNotFound,
    LedPermissionDenied,
    LedWriteError,
)

__all__ = [
    "ColorValuesError",
    "InvalidLedName",
    "LedDevice",
    "LedError",
    "LedErrorKind",
    "LedNotFound",
    "LedPermissionDenied",
    "LedWriteError",
    "led_names",
]
