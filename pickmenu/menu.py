"""Input editing, selection and paging state of the menu."""

import enum
from dataclasses import dataclass

from pickmenu.matching import match_items

TEXT_LIMIT = 8191
WORD_DELIMITERS = " "


@dataclass
class Item:
    """One selectable line; ``out`` marks items already emitted."""

    text: str
    out: bool = False

    def __str__(self):
        return self.text


class Key(enum.Enum):
    """Named keys the menu reacts to."""

    HOME = "home"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    PRIOR = "prior"
    NEXT = "next"
    DELETE = "delete"
    BACKSPACE = "backspace"
    TAB = "tab"
    RETURN = "return"
    ESCAPE = "escape"


class Action(enum.Enum):
    """What the caller should do after a key press."""

    IGNORE = "ignore"
    REDRAW = "redraw"
    PASTE_PRIMARY = "paste-primary"
    PASTE_CLIPBOARD = "paste-clipboard"
    CANCEL = "cancel"
    SELECT = "select"
    EMIT = "emit"


_CTRL_KEYS = {
    "a": Key.HOME,
    "b": Key.LEFT,
    "c": Key.ESCAPE,
    "d": Key.DELETE,
    "e": Key.END,
    "f": Key.RIGHT,
    "g": Key.ESCAPE,
    "h": Key.BACKSPACE,
    "i": Key.TAB,
    "j": Key.RETURN,
    "J": Key.RETURN,
    "m": Key.RETURN,
    "M": Key.RETURN,
    "n": Key.DOWN,
    "p": Key.UP,
}

_ALT_KEYS = {
    "g": Key.HOME,
    "G": Key.END,
    "h": Key.UP,
    "j": Key.NEXT,
    "k": Key.PRIOR,
    "l": Key.DOWN,
}


def _is_control(char):
    code = ord(char[0])
    return code < 0x20 or code == 0x7F


class Menu:
    """Typed text, the matching items and the visible page of them.

    Positions in ``matches`` are plain indices: ``sel`` is the selected
    item, ``page_start`` the first visible one, ``next_page`` the first item
    of the following page (None on the last page) and ``prev_page`` the
    first item of the preceding page.
    """

    def __init__(self, items, lines=0, case_insensitive=False,
                 text_width=len, available_width=80):
        self.items = [item if isinstance(item, Item) else Item(item)
                      for item in items]
        self.lines = lines
        self.case_insensitive = case_insensitive
        self.text_width = text_width
        self.available_width = available_width
        self.text = ""
        self.cursor = 0
        self.matches = []
        self.sel = None
        self.page_start = None
        self.next_page = None
        self.prev_page = None
        self.match()

    @property
    def selected(self):
        """The selected item, or None."""
        return None if self.sel is None else self.matches[self.sel]

    def match(self):
        """Refilter the items against the text and reset the selection."""
        self.matches = match_items(self.items, self.text, self.case_insensitive)
        self.sel = self.page_start = 0 if self.matches else None
        self.calc_offsets()

    def insert(self, s):
        """Insert *s* at the cursor unless the text would grow too long."""
        if len(self.text.encode()) + len(s.encode()) > TEXT_LIMIT:
            return
        self.text = self.text[:self.cursor] + s + self.text[self.cursor:]
        self.cursor += len(s)
        self.match()

    def erase(self, start):
        """Delete the text from *start* up to the cursor."""
        if not 0 <= start <= self.cursor:
            raise ValueError(f"erase start {start} outside 0..{self.cursor}")
        self.text = self.text[:start] + self.text[self.cursor:]
        self.cursor = start
        self.match()

    def _word_start(self):
        pos = self.cursor
        while pos > 0 and self.text[pos - 1] in WORD_DELIMITERS:
            pos -= 1
        while pos > 0 and self.text[pos - 1] not in WORD_DELIMITERS:
            pos -= 1
        return pos

    def move_word_edge(self, direction):
        """Move the cursor to the start (<0) or end (>0) of a word."""
        if direction < 0:
            self.cursor = self._word_start()
            return
        pos = self.cursor
        end = len(self.text)
        while pos < end and self.text[pos] in WORD_DELIMITERS:
            pos += 1
        while pos < end and self.text[pos] not in WORD_DELIMITERS:
            pos += 1
        self.cursor = pos

    def _step(self, index, limit):
        if self.lines > 0:
            return 1
        return min(self.text_width(self.matches[index].text), limit)

    def calc_offsets(self):
        """Work out where the next and previous pages begin."""
        if self.page_start is None:
            self.next_page = self.prev_page = None
            return
        limit = self.lines if self.lines > 0 else self.available_width
        count = len(self.matches)

        total = 0
        nxt = self.page_start
        while nxt < count:
            total += self._step(nxt, limit)
            if total > limit:
                break
            nxt += 1
        self.next_page = nxt if nxt < count else None

        total = 0
        prv = self.page_start
        while prv > 0:
            total += self._step(prv - 1, limit)
            if total > limit:
                break
            prv -= 1
        self.prev_page = prv

    def visible_items(self):
        """The matching items shown on the current page."""
        if self.page_start is None:
            return []
        stop = len(self.matches) if self.next_page is None else self.next_page
        return self.matches[self.page_start:stop]

    def press(self, key=None, char="", ctrl=False, alt=False, shift=False):
        """Handle one key press.

        *key* is a named Key or None for a plain character given in *char*.
        Returns ``(action, output)`` where *output* is the line to print for
        SELECT and EMIT and None otherwise.
        """
        if ctrl:
            if key is None:
                if char in _CTRL_KEYS:
                    key = _CTRL_KEYS[char]
                    if char in "jJmM":
                        ctrl = False
                elif char == "k":
                    self.text = self.text[:self.cursor]
                    self.match()
                    return Action.REDRAW, None
                elif char == "u":
                    self.erase(0)
                    return Action.REDRAW, None
                elif char == "w":
                    self.erase(self._word_start())
                    return Action.REDRAW, None
                elif char in ("y", "Y"):
                    action = Action.PASTE_CLIPBOARD if shift else Action.PASTE_PRIMARY
                    return action, None
                elif char == "[":
                    return Action.CANCEL, None
                else:
                    return Action.IGNORE, None
            elif key is Key.LEFT:
                self.move_word_edge(-1)
                return Action.REDRAW, None
            elif key is Key.RIGHT:
                self.move_word_edge(+1)
                return Action.REDRAW, None
            elif key is not Key.RETURN:
                return Action.IGNORE, None
        elif alt:
            if key is not None:
                return Action.IGNORE, None
            if char == "b":
                self.move_word_edge(-1)
                return Action.REDRAW, None
            if char == "f":
                self.move_word_edge(+1)
                return Action.REDRAW, None
            if char not in _ALT_KEYS:
                return Action.IGNORE, None
            key = _ALT_KEYS[char]

        if key is None:
            if char and not _is_control(char):
                self.insert(char)
            return Action.REDRAW, None
        return self._handle_key(key, ctrl, shift)

    def _handle_key(self, key, ctrl, shift):
        if key is Key.DELETE:
            if self.cursor >= len(self.text):
                return Action.IGNORE, None
            self.cursor += 1
            key = Key.BACKSPACE
        if key is Key.BACKSPACE:
            if self.cursor == 0:
                return Action.IGNORE, None
            self.erase(self.cursor - 1)
        elif key is Key.END:
            self._end()
        elif key is Key.ESCAPE:
            return Action.CANCEL, None
        elif key is Key.HOME:
            if self.sel == (0 if self.matches else None):
                self.cursor = 0
            else:
                self.sel = self.page_start = 0
                self.calc_offsets()
        elif key in (Key.LEFT, Key.UP):
            if key is Key.LEFT:
                if self.cursor > 0 and (not self.sel or self.lines > 0):
                    self.cursor -= 1
                    return Action.REDRAW, None
                if self.lines > 0:
                    return Action.IGNORE, None
            self._up()
        elif key is Key.NEXT:
            if self.next_page is None:
                return Action.IGNORE, None
            self.sel = self.page_start = self.next_page
            self.calc_offsets()
        elif key is Key.PRIOR:
            if self.prev_page is None:
                return Action.IGNORE, None
            self.sel = self.page_start = self.prev_page
            self.calc_offsets()
        elif key is Key.RETURN:
            chosen = self.selected
            output = chosen.text if chosen is not None and not shift else self.text
            if not ctrl:
                return Action.SELECT, output
            if chosen is not None:
                chosen.out = True
            return Action.EMIT, output
        elif key in (Key.RIGHT, Key.DOWN):
            if key is Key.RIGHT:
                if self.cursor < len(self.text):
                    self.cursor += 1
                    return Action.REDRAW, None
                if self.lines > 0:
                    return Action.IGNORE, None
            self._down()
        elif key is Key.TAB:
            chosen = self.selected
            if chosen is None:
                return Action.IGNORE, None
            self.text = chosen.text.encode()[:TEXT_LIMIT].decode(errors="ignore")
            self.cursor = len(self.text)
            self.match()
        return Action.REDRAW, None

    def _end(self):
        if self.cursor < len(self.text):
            self.cursor = len(self.text)
            return
        last = len(self.matches) - 1
        if self.next_page is not None:
            self.page_start = last
            self.calc_offsets()
            self.page_start = self.prev_page
            self.calc_offsets()
            while self.next_page is not None and self.page_start < last:
                self.page_start += 1
                self.calc_offsets()
        self.sel = last if self.matches else None

    def _up(self):
        if self.sel:
            self.sel -= 1
            if self.sel + 1 == self.page_start:
                self.page_start = self.prev_page
                self.calc_offsets()

    def _down(self):
        if self.sel is not None and self.sel + 1 < len(self.matches):
            self.sel += 1
            if self.sel == self.next_page:
                self.page_start = self.next_page
                self.calc_offsets()