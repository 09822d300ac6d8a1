"""Text output for the led/lsled tools.

Renderers return the full text; nothing is printed here so that a failing
report never leaves half of its lines on the terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, TextIO, Union

from ..core.leds import ColorValuesError, LedDevice

FONT_NORMAL = "\033[0m"
FONT_BOLD = "\033[1m"

LIST_HEADER = ("NAME", "CUR/MAX", "TRIGGER", "COLOR:VALUE[,COLOR:VALUE...]")


@dataclass(frozen=True)
class Styling:
    bold: str = ""
    normal: str = ""

    @classmethod
    def for_stream(cls, stream: TextIO) -> "Styling":
        try:
            tty = stream.isatty()
        except (AttributeError, ValueError):
            tty = False
        if tty:
            return cls(bold=FONT_BOLD, normal=FONT_NORMAL)
        return cls()

    def emphasize(self, text: str) -> str:
        return f"{self.bold}{text}{self.normal}"


PLAIN = Styling()


def _num(value: Optional[int]) -> str:
    return "-" if value is None else str(value)


def _color_pairs(led: LedDevice, sep: str) -> Optional[str]:
    names = led.color_names()
    values = led.color_intensity()
    if len(names) != len(values):
        return None
    return sep.join(f"{n}:{v}" for n, v in zip(names, values))


def _list_row(led: Union[LedDevice, str]) -> tuple[str, str, str, str]:
    if isinstance(led, str):
        # Listed under the LED root but could not be opened.
        return led, "-/-", "-", ""

    br = f"{_num(led.brightness())}/{_num(led.max_brightness())}"
    trigger = led.trigger() or "-"

    colors = ""
    if led.is_multicolor():
        # A count mismatch just leaves the cell empty here.
        colors = _color_pairs(led, ",") or ""

    return led.name, br, trigger, colors


def render_led_list(leds: Iterable[Union[LedDevice, str]]) -> str:
    """Render the LED table.

    Entries given as plain names get a row of "-" cells.
    """

    rows = [LIST_HEADER]
    rows += sorted((_list_row(led) for led in leds), key=lambda row: row[0])

    widths = [max(len(row[col]) for row in rows) for col in range(3)]
    has_colors = any(row[3] for row in rows[1:])

    lines: list[str] = []
    for name, br, trigger, colors in rows:
        show_colors = has_colors and bool(colors)
        cells = [name.ljust(widths[0]), br.ljust(widths[1])]
        cells.append(trigger.ljust(widths[2]) if show_colors else trigger)
        if show_colors:
            cells.append(colors)
        lines.append(" ".join(cells))

    return "\n".join(lines)


def render_led_names(names: Iterable[str]) -> str:
    return "\n".join(sorted(names))


def render_led_info(led: LedDevice, styling: Styling = PLAIN) -> str:
    max_br = _num(led.max_brightness())

    lines = [
        f"Name          : {led.name}",
        f"Location      : {led.path}",
        f"Brightness    : {_num(led.brightness()).rjust(len(max_br))}",
        f"Max brightness: {max_br}",
    ]

    if led.is_multicolor():
        pairs = _color_pairs(led, " ")
        if pairs is None:
            raise ColorValuesError(
                f"Cannot get color values of {led.name}",
                expected=len(led.color_names()),
                actual=len(led.color_intensity()),
            )
        lines.append("Multicolor    : Yes")
        lines.append(f"Color values  : {pairs}")
    else:
        lines.append("Multicolor    : No")

    active = led.trigger()
    triggers = [
        f"[{styling.emphasize(t)}]" if t == active else t
        for t in sorted(led.triggers())
    ]
    lines.append(f"Triggers      : {' '.join(triggers) or '-'}")

    return "\n".join(lines)


def render_led_status(led: LedDevice) -> str:
    """Render `brightness/max`, the color values and the active trigger.

    The color field is left out when the intensity values don't match the
    color names. The trigger field is left out for `none`; an LED with no
    active trigger shows an empty `trigger:` field.
    """

    out = f"{_num(led.brightness())}/{_num(led.max_brightness())}"

    if led.is_multicolor():
        pairs = _color_pairs(led, ",")
        if pairs:
            out += f"\t{pairs}"

    active = led.trigger()
    if active != "none":
        out += f"\ttrigger:{active or ''}"

    return out
