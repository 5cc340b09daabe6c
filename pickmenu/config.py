"""Command-line options of the menu program."""

import re
from dataclasses import dataclass, field

PROGRAM = "pickmenu"
VERSION = "1.0"
USAGE = (
    f"usage: {PROGRAM} [-bfiv] [-l lines] [-p prompt] [-fn font] [-m monitor]\n"
    "             [-h height] [-x xoffset] [-y yoffset] [-w width]\n"
    "             [-nb color] [-nf color] [-sb color] [-sf color] [-w windowid]"
)
DEFAULT_FONT = "Px437 IBM PGC:size=12"
MIN_LINE_HEIGHT = 8
MIN_WIDTH = 500

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """The command line could not be understood."""


def _default_colors():
    return {
        "norm": ("#c8c8c3", "#0A0A0A"),
        "sel": ("#0A0A0A", "#a7a891"),
        "out": ("#0A0A0A", "#f8f8f2"),
    }


@dataclass
class Options:
    """Settings of one menu run; colours map a scheme to ``(fg, bg)``."""

    topbar: bool = False
    centered: bool = True
    min_width: int = MIN_WIDTH
    font: str = DEFAULT_FONT
    prompt: str | None = None
    colors: dict = field(default_factory=_default_colors)
    lines: int = 20
    line_height: int = 0
    border_width: int = 1
    x: int = 0
    y: int = 0
    width: int = 0
    monitor: int = -1
    fast: bool = False
    case_insensitive: bool = False
    show_version: bool = False


def _atoi(value):
    """Leading integer of *value*, or 0 when it has none."""
    found = _INT_PREFIX.match(value)
    return int(found.group(1)) if found else 0


def _set_color(scheme, index):
    def apply(options, value):
        pair = list(options.colors[scheme])
        pair[index] = value
        options.colors[scheme] = tuple(pair)
    return apply


def _set_int(name):
    def apply(options, value):
        setattr(options, name, _atoi(value))
    return apply


def _set_line_height(options, value):
    options.line_height = max(_atoi(value), MIN_LINE_HEIGHT)


def _set_prompt(options, value):
    options.prompt = value


def _set_font(options, value):
    options.font = value


_VALUE_OPTIONS = {
    "-l": _set_int("lines"),
    "-h": _set_line_height,
    "-x": _set_int("x"),
    "-y": _set_int("y"),
    "-w": _set_int("width"),
    "-m": _set_int("monitor"),
    "-p": _set_prompt,
    "-fn": _set_font,
    "-nb": _set_color("norm", 1),
    "-nf": _set_color("norm", 0),
    "-sb": _set_color("sel", 1),
    "-sf": _set_color("sel", 0),
    "-bw": _set_int("border_width"),
}

_SWITCHES = {
    "-b": ("topbar", False),
    "-f": ("fast", True),
    "-c": ("centered", True),
    "-i": ("case_insensitive", True),
}


def parse_args(argv):
    """Parse *argv* (without the program name) into Options.

    Parsing stops at ``-v``, which only sets ``show_version``.
    """
    args = list(argv)
    options = Options()
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "-v":
            options.show_version = True
            return options
        if arg in _SWITCHES:
            name, value = _SWITCHES[arg]
            setattr(options, name, value)
        elif index + 1 == len(args) or arg not in _VALUE_OPTIONS:
            raise UsageError(USAGE)
        else:
            index += 1
            _VALUE_OPTIONS[arg](options, args[index])
        index += 1
    return options