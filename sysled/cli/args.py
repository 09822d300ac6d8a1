from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import NoReturn, Optional, Sequence

from ..core.leds.common import parse_unsigned
from .render import PLAIN, Styling

HELP_HINT = "use option -h for help."


@dataclass
class LedRequest:
    led_name: str = ""
    trigger: str = ""
    brightness: Optional[int] = None
    colors: list[int] = field(default_factory=list)
    list_all: bool = False
    names_only: bool = False
    show_info: bool = False
    colors_only: bool = False

    def is_query(self) -> bool:
        return self.brightness is None and not self.colors and not self.trigger


def led_usage(prog: str, styling: Styling = PLAIN) -> str:
    b = styling.emphasize
    return "\n".join(
        [
            "",
            b(f"Usage: {prog} [OPTIONS] [LED_NAME] [BRIGHTNESS [COLOR_INTENSITY ...]]"),
            "  List LEDs, modify or show LED brightness, color and trigger.",
            "  If only argument LED_NAME is supplied, show the current and",
            "  maximum brightness, trigger name, and color intensity values.",
            "  If argument BRIGHTNESS is supplied, set the brightness value.",
            "  If COLOR_INTENSITY arguments are supplied, set the color",
            "  intensity value for each color.",
            "",
            f"{b('  LED_NAME         ')}The name of the LED to operate on.",
            f"{b('  BRIGHTNESS       ')}Set the brightness level to this value.",
            f"{b('  COLOR_INTENSITY  ')}Set the color intensity values.",
            "",
            b("Options:"),
            "  -l, --list             List available LEDs. This option ignores other arguments.",
            "  -i, --info             Print detailed information about the LED.",
            "  -c, --colors           Set only color values. This assumes all arguments after LED_NAME are color intensity values.",
            "  -t, --trigger=TRIGGER  Set a trigger for the LED.",
            "  -h, --help             Print this help message.",
            "",
        ]
    )


def lsled_usage(prog: str, styling: Styling = PLAIN) -> str:
    b = styling.emphasize
    return "\n".join(
        [
            "",
            b(f"Usage: {prog} [OPTIONS]"),
            "  List information about available LEDs.",
            "",
            b("Options:"),
            "  -n, --names  Print only the names of the available LEDs.",
            "  -h, --help   Print this help message.",
            "",
        ]
    )


class _UsageAction(argparse.Action):
    """Print the tool's own usage text and exit 0, whatever else is on the line."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, text: str = "", help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)
        self.text = text

    def __call__(self, parser, namespace, values, option_string=None):
        parser._print_message(self.text + "\n", sys.stdout)
        parser.exit(0)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.exit(1, f"{self.prog}: {message}\nUse option -h for help.\n")


def _fail(parser: argparse.ArgumentParser, message: str) -> NoReturn:
    parser.exit(1, f"Error: {message}\n")


def _parse_value(parser: argparse.ArgumentParser, token: str) -> int:
    value = parse_unsigned(token)
    if value is None:
        _fail(parser, "Invalid argument.")
    return value


def parse_led_args(argv: Sequence[str], *, prog: str = "led", styling: Styling = PLAIN) -> LedRequest:
    parser = _Parser(prog=prog, add_help=False)
    parser.add_argument("-l", "--list", action="store_true")
    parser.add_argument("-i", "--info", dest="show_info", action="store_true")
    parser.add_argument("-c", "--colors", dest="colors_only", action="store_true")
    parser.add_argument("-t", "--trigger", default="", metavar="TRIGGER")
    parser.add_argument("-h", "--help", action=_UsageAction, text=led_usage(prog, styling))
    parser.add_argument("args", nargs="*")

    ns = parser.parse_intermixed_args(list(argv))
    positional: list[str] = list(ns.args or [])

    req = LedRequest(
        trigger=ns.trigger,
        list_all=ns.list,
        show_info=ns.show_info,
        colors_only=ns.colors_only,
    )

    if req.list_all:
        if positional:
            _fail(parser, f"Too many arguments, {HELP_HINT}")
        return req

    if not positional:
        _fail(parser, f"Missing arguments, {HELP_HINT}")

    req.led_name = positional.pop(0)

    if req.show_info:
        if positional:
            _fail(parser, f"Too many arguments, {HELP_HINT}")
        return req

    values = [_parse_value(parser, token) for token in positional]
    if values and not req.colors_only:
        req.brightness = values.pop(0)
    req.colors = values

    return req


def parse_lsled_args(argv: Sequence[str], *, prog: str = "lsled", styling: Styling = PLAIN) -> LedRequest:
    parser = _Parser(prog=prog, add_help=False)
    parser.add_argument("-n", "--names", dest="names_only", action="store_true")
    parser.add_argument("-h", "--help", action=_UsageAction, text=lsled_usage(prog, styling))
    parser.add_argument("args", nargs="*")

    ns = parser.parse_intermixed_args(list(argv))
    if ns.args:
        _fail(parser, f"Too many arguments, {HELP_HINT}")

    return LedRequest(list_all=True, names_only=ns.names_only)
