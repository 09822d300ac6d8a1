"""led / lsled entrypoints.

This module owns the startup sequence (logging, terminal styling) and then
runs one request against the LED class devices.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence, Union

from ..core.leds import ColorValuesError, LedDevice, LedError, led_names
from ..core.paths import debug_enabled
from .args import LedRequest, parse_led_args, parse_lsled_args
from .render import Styling, render_led_info, render_led_list, render_led_names, render_led_status

logger = logging.getLogger(__name__)

LSLED_PROG = "lsled"


def configure_logging() -> None:
    """Configure root logging for the command-line tools.

    A root logger that already has handlers is left as it is.
    """

    if logging.getLogger().handlers:
        return

    level = logging.DEBUG if debug_enabled() else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _open_all() -> list[Union[LedDevice, str]]:
    leds: list[Union[LedDevice, str]] = []
    for name in sorted(led_names()):
        try:
            leds.append(LedDevice(name))
        except LedError as exc:
            # Still listed, with empty cells.
            logger.debug("Cannot open LED %s: %s", name, exc)
            leds.append(name)
    return leds


def _list(req: LedRequest) -> None:
    if req.names_only:
        text = render_led_names(led_names())
    else:
        text = render_led_list(_open_all())
    if text:
        print(text)


def _apply(req: LedRequest, led: LedDevice) -> None:
    if req.colors and len(req.colors) != len(led.color_names()):
        raise ColorValuesError(
            "Invalid number of color values",
            expected=len(led.color_names()),
            actual=len(req.colors),
        )

    if req.trigger:
        logger.debug("led %s: trigger -> %s", led.name, req.trigger)
        led.set_trigger(req.trigger)

    if req.brightness is not None:
        logger.debug("led %s: brightness -> %d", led.name, req.brightness)
        led.set_brightness(req.brightness)

    if req.colors:
        logger.debug("led %s: multi_intensity -> %s", led.name, req.colors)
        led.set_color_intensity(req.colors)


def run(req: LedRequest, styling: Styling) -> int:
    if req.list_all:
        _list(req)
        return 0

    led = LedDevice(req.led_name)

    if req.show_info:
        print(render_led_info(led, styling))
        return 0

    if req.is_query():
        print(render_led_status(led))
        return 0

    _apply(req, led)
    return 0


def _run_guarded(req: LedRequest, styling: Styling) -> int:
    try:
        return run(req, styling)
    except KeyboardInterrupt:
        return 130
    except (LedError, OSError) as exc:
        logger.debug("Request failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def led_main(argv: Optional[Sequence[str]] = None, *, prog: Optional[str] = None) -> int:
    configure_logging()
    styling = Styling.for_stream(sys.stdout)
    if argv is None:
        argv = sys.argv[1:]
    req = parse_led_args(argv, prog=prog or "led", styling=styling)
    return _run_guarded(req, styling)


def lsled_main(argv: Optional[Sequence[str]] = None, *, prog: Optional[str] = None) -> int:
    configure_logging()
    styling = Styling.for_stream(sys.stdout)
    if argv is None:
        argv = sys.argv[1:]
    req = parse_lsled_args(argv, prog=prog or LSLED_PROG, styling=styling)
    return _run_guarded(req, styling)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Pick the tool by program name, the way a single binary linked as both would."""

    if argv is None:
        argv = sys.argv
    prog = os.path.basename(argv[0]) if argv else "led"
    if prog == LSLED_PROG:
        return lsled_main(argv[1:], prog=prog)
    return led_main(argv[1:], prog=prog)
