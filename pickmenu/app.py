"""The menu window: reads items, lets the user pick one and prints it."""

import sys
import time
from dataclasses import replace

from pickmenu.config import PROGRAM, VERSION, UsageError, parse_args
from pickmenu.errors import MenuError, die
from pickmenu.layout import Screen, compute_geometry, ellipsize
from pickmenu.menu import Action, Item, Key, Menu

_SHIFT = 0x1
_CONTROL = 0x4
_MOD1 = 0x8
_DEFAULT_FONT_SIZE = 10

_KEYSYMS = {
    "Home": Key.HOME, "KP_Home": Key.HOME,
    "End": Key.END, "KP_End": Key.END,
    "Left": Key.LEFT, "KP_Left": Key.LEFT,
    "Right": Key.RIGHT, "KP_Right": Key.RIGHT,
    "Up": Key.UP, "KP_Up": Key.UP,
    "Down": Key.DOWN, "KP_Down": Key.DOWN,
    "Prior": Key.PRIOR, "Page_Up": Key.PRIOR, "KP_Prior": Key.PRIOR,
    "KP_Page_Up": Key.PRIOR,
    "Next": Key.NEXT, "Page_Down": Key.NEXT, "KP_Next": Key.NEXT,
    "KP_Page_Down": Key.NEXT,
    "Delete": Key.DELETE, "KP_Delete": Key.DELETE,
    "BackSpace": Key.BACKSPACE,
    "Tab": Key.TAB,
    "Return": Key.RETURN, "KP_Enter": Key.RETURN,
    "Escape": Key.ESCAPE,
}

_CHAR_NAMES = {"bracketleft": "[", "space": " "}


def read_items(stream):
    """One Item per line of *stream*, without the line end."""
    return [Item(line.removesuffix("\n")) for line in stream]


def _font_spec(spec):
    """Family and Tk size of a ``Family:size=N`` font description."""
    family, _, attributes = spec.partition(":")
    size = _DEFAULT_FONT_SIZE
    for attribute in attributes.split(":"):
        name, _, value = attribute.partition("=")
        try:
            if name == "size":
                size = round(float(value))
            elif name == "pixelsize":
                size = -round(float(value))
        except ValueError:
            continue
    return family, size


class MenuWindow:
    """A borderless window showing the menu and handling its keys."""

    def __init__(self, options, items):
        try:
            import tkinter
            from tkinter import font as tkfont
        except ImportError:
            die("cannot open display")
        self.options = options
        self._tk = tkinter
        try:
            root = tkinter.Tk(className=PROGRAM)
        except tkinter.TclError:
            die("cannot open display")
        self._root = root
        root.withdraw()
        self._status = 1

        family, size = _font_spec(options.font)
        try:
            self._font = tkfont.Font(root=root, family=family, size=size)
        except tkinter.TclError:
            root.destroy()
            die("no fonts could be loaded.")
        for pair in options.colors.values():
            for color in pair:
                try:
                    root.winfo_rgb(color)
                except tkinter.TclError:
                    root.destroy()
                    die(f"error, cannot allocate color '{color}'")

        self._fh = self._font.metrics("linespace")
        self._lrpad = self._fh
        self._bh = max(self._fh + 2, options.line_height)
        count = len(items)
        self._lines = count if options.lines < 0 else min(options.lines, count)

        widest = max(items, key=lambda item: self._font.measure(item.text),
                     default=None)
        input_width = self._textw(widest.text) if widest is not None else 0
        max_text = max((self._textw(item.text) for item in items), default=0)
        prompt = options.prompt or ""
        if options.centered or not prompt:
            self._prompt_width = 0
        else:
            self._prompt_width = self._textw(prompt) - self._lrpad // 4

        screen = Screen(0, 0, root.winfo_screenwidth(), root.winfo_screenheight())
        geometry = compute_geometry(screen, replace(options, lines=self._lines),
                                    self._bh, max_text, self._prompt_width)
        self._width = geometry.width
        self._height = geometry.height
        self._input_width = min(input_width, geometry.width // 3)
        available = geometry.width - (self._prompt_width + self._input_width
                                      + self._textw("<") + self._textw(">"))
        self.menu = Menu(items, lines=self._lines,
                         case_insensitive=options.case_insensitive,
                         text_width=self._textw, available_width=available)

        border = max(options.border_width, 0)
        y = geometry.y - (0 if options.topbar else border * 2)
        root.overrideredirect(True)
        root.geometry(f"{geometry.width}x{geometry.height + 2 * border}"
                      f"+{geometry.x}+{y}")
        frame = tkinter.Frame(root, bg=options.colors["sel"][1], bd=0,
                              padx=border, pady=border)
        frame.pack(fill="both", expand=True)
        self._canvas = tkinter.Canvas(
            frame, width=max(geometry.width - 2 * border, 1),
            height=geometry.height, highlightthickness=0, bd=0,
            bg=options.colors["norm"][1])
        self._canvas.pack()
        root.bind("<Key>", self._on_key)
        root.bind("<Visibility>", lambda event: root.lift())

    def run(self):
        """Show the menu until a choice or cancel; return the exit status."""
        root = self._root
        root.deiconify()
        root.lift()
        root.update()
        self._grab_keyboard()
        root.focus_force()
        self._draw()
        root.mainloop()
        return self._status

    def _grab_keyboard(self):
        for _ in range(1000):
            try:
                self._root.grab_set_global()
                return
            except self._tk.TclError:
                time.sleep(0.001)
        self._root.destroy()
        die("cannot grab keyboard")

    def _finish(self, status):
        self._status = status
        self._root.destroy()

    def _textw(self, text):
        return self._font.measure(text) + self._lrpad

    def _on_key(self, event):
        state = event.state if isinstance(event.state, int) else 0
        ctrl = bool(state & _CONTROL)
        alt = bool(state & _MOD1)
        shift = bool(state & _SHIFT)
        key = _KEYSYMS.get(event.keysym)
        char = ""
        if key is None:
            if ctrl or alt:
                keysym = event.keysym
                char = _CHAR_NAMES.get(keysym, keysym if len(keysym) == 1 else "")
            else:
                char = event.char
            if not char:
                return
        action, output = self.menu.press(key, char, ctrl=ctrl, alt=alt,
                                         shift=shift)
        if action is Action.IGNORE:
            return
        if action is Action.CANCEL:
            self._finish(1)
            return
        if action is Action.SELECT:
            print(output, flush=True)
            self._finish(0)
            return
        if action is Action.EMIT:
            print(output, flush=True)
        elif action is Action.PASTE_PRIMARY:
            self._paste("PRIMARY")
        elif action is Action.PASTE_CLIPBOARD:
            self._paste("CLIPBOARD")
        self._draw()

    def _paste(self, selection):
        try:
            data = self._root.selection_get(selection=selection,
                                            type="UTF8_STRING")
        except self._tk.TclError:
            return
        self.menu.insert(data.split("\n", 1)[0])

    def _box(self, x, y, width, text, scheme):
        fg, bg = self.options.colors[scheme]
        self._canvas.create_rectangle(x, y, x + width, y + self._bh,
                                      fill=bg, outline="")
        pad = self._lrpad // 2
        shown = ellipsize(text, width - pad, self._font.measure)
        if shown:
            self._canvas.create_text(x + pad, y + self._bh // 2, text=shown,
                                     anchor="w", font=self._font, fill=fg)
        return x + width

    def _draw_item(self, item, x, y, width):
        if item is self.menu.selected:
            scheme = "sel"
        elif item.out:
            scheme = "out"
        else:
            scheme = "norm"
        return self._box(x, y, width, item.text, scheme)

    def _draw(self):
        canvas = self._canvas
        menu = self.menu
        mw, mh, bh = self._width, self._height, self._bh
        norm_fg, norm_bg = self.options.colors["norm"]
        canvas.delete("all")
        canvas.create_rectangle(0, 0, mw, mh, fill=norm_bg, outline="")

        x = 0
        prompt = self.options.prompt
        if prompt:
            x = self._box(0, 0, self._prompt_width or self._textw(prompt),
                          prompt, "sel")
        width = mw - x if (self._lines > 0 or not menu.matches) else self._input_width
        self._box(x, 0, width, menu.text, "norm")

        curpos = (self._textw(menu.text) - self._textw(menu.text[menu.cursor:])
                  + self._lrpad // 2 - 1)
        if curpos < width:
            top = 2 + (bh - self._fh) // 2
            canvas.create_rectangle(x + curpos, top, x + curpos + 2,
                                    top + self._fh - 4, fill=norm_fg, outline="")

        if self._lines > 0:
            y = 0
            for item in menu.visible_items():
                y += bh
                self._draw_item(item, x, y, mw - x)
        elif menu.matches:
            x += self._input_width
            left = self._textw("<")
            if menu.page_start:
                self._box(x, 0, left, "<", "norm")
            x += left
            right = self._textw(">")
            for item in menu.visible_items():
                x = self._draw_item(item, x, 0,
                                    min(self._textw(item.text), mw - x - right))
            if menu.next_page is not None:
                self._box(mw - right, 0, right, ">", "norm")


def main(argv=None):
    """Command entry point; prints the chosen line and returns the status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.show_version:
        print(f"{PROGRAM}-{VERSION}")
        return 0
    try:
        items = read_items(sys.stdin)
        return MenuWindow(options, items).run()
    except MenuError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_status