"""Placement of the menu window and fitting of text into boxes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Screen:
    """One monitor's area on the root window."""

    x_org: int
    y_org: int
    width: int
    height: int


@dataclass(frozen=True)
class Geometry:
    """Position and size of the menu."""

    x: int
    y: int
    width: int
    height: int


def _cdiv(a, b):
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def intersect(x, y, w, h, screen):
    """Area shared by the rectangle and *screen*."""
    across = max(0, min(x + w, screen.x_org + screen.width) - max(x, screen.x_org))
    down = max(0, min(y + h, screen.y_org + screen.height) - max(y, screen.y_org))
    return across * down


def choose_screen(screens, monitor, focus_rect, pointer):
    """Index of the screen the menu should appear on.

    An in-range *monitor* wins; otherwise the screen overlapping the focused
    window's rectangle ``(x, y, w, h)`` most; failing that, and only when no
    monitor was requested, the screen under the ``(x, y)`` pointer.
    """
    if not screens:
        raise ValueError("no screens to choose from")
    chosen = 0
    area = 0
    if 0 <= monitor < len(screens):
        chosen = monitor
    elif focus_rect is not None:
        for index, screen in enumerate(screens):
            overlap = intersect(*focus_rect, screen)
            if overlap > area:
                area = overlap
                chosen = index
    if monitor < 0 and not area and pointer is not None:
        px, py = pointer
        chosen = next(
            (index for index, screen in enumerate(screens)
             if intersect(px, py, 1, 1, screen)),
            0,
        )
    return chosen


def compute_geometry(screen, options, bar_height, max_text_width, prompt_width):
    """Where the menu goes on *screen* and how large it is."""
    lines = max(options.lines, 0)
    height = (lines + 1) * bar_height
    if options.centered:
        width = min(max(max_text_width + prompt_width, options.min_width),
                    screen.width)
        x = screen.x_org + _cdiv(screen.width - width, 2)
        y = screen.y_org + _cdiv(screen.height - height, 2)
    else:
        x = screen.x_org + options.x
        if options.topbar:
            y = screen.y_org + options.y
        else:
            y = screen.y_org + screen.height - height - options.y
        width = options.width if options.width > 0 else screen.width
    return Geometry(x, y, width, height)


def ellipsize(text, width, measure):
    """Shorten *text* to fit *width*, ending it with dots when cut.

    *measure* gives the width of a string. Text that fits is returned as is.
    """
    length = len(text)
    extent = measure(text)
    while length and extent > width:
        extent = measure(text[:length])
        length -= 1
    if not length:
        return ""
    if length == len(text):
        return text
    dots = min(3, length)
    return text[:length - dots] + "." * dots