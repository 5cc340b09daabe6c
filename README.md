# pickmenu

`pickmenu` is a small, keyboard-driven menu. It reads one choice per line
from standard input, shows them in a borderless window, narrows the list as
you type, and prints the choice you pick to standard output. The exit status
is 0 when a choice was made and 1 when the menu was dismissed.

It comes with `pickmenu-stest`, a filter that prints only the file names
that pass a set of tests, which is handy for building the menu's input.

The window is drawn with `tkinter` from the standard library, so a Python
with Tk support and a running display are needed. Nothing outside the
standard library is required.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Using the menu

```
printf 'firefox\nxterm\nemacs\n' | pickmenu -p 'run:'
```

Typing filters the list. The text you type is split on spaces, and every
word must appear in an entry for it to stay. Entries that equal the whole
input come first, then those that start with the first word, then the
rest; each group keeps the order of standard input.

The menu is centred on the screen, with a width of at least 500 pixels
(but no wider than the screen) and one line per entry up to the `-l`
limit. With `-l 0` the entries are shown side by side on one line, with
`<` and `>` marking further pages.

### Options

| Option        | Meaning                                                  |
|---------------|----------------------------------------------------------|
| `-v`          | print `pickmenu-1.0` and exit                            |
| `-c`          | centre the menu (the default)                            |
| `-b`          | bottom placement, for uncentred layouts (the default)    |
| `-i`          | match case-insensitively (ASCII letters)                 |
| `-l lines`    | number of list lines (default 20, capped at the number of entries; 0 for a single line) |
| `-h height`   | minimum height of one menu line (at least 8)             |
| `-p prompt`   | prompt shown left of the input field                     |
| `-fn font`    | font, as `Family:size=N` or `Family:pixelsize=N`         |
| `-nb color`   | normal background colour                                 |
| `-nf color`   | normal foreground colour                                 |
| `-sb color`   | selected background colour (also the border colour)      |
| `-sf color`   | selected foreground colour                               |
| `-bw width`   | border width                                             |
| `-x offset`, `-y offset`, `-w width` | position and width for uncentred layouts |
| `-m monitor`  | monitor number (accepted, see below)                     |
| `-f`          | accepted, see below                                      |

Numeric values are read like C's `atoi`: the leading integer is used and
anything unparsable counts as 0. An option that needs a value but is the
last argument, or an unknown option, prints a usage message and exits with
status 1. A colour Tk cannot understand, or a font it cannot load, ends the
program with status 1.

### Keys

- `Return` prints the selected entry (or, with `Shift`, the typed text) and exits;
  `Ctrl-Return` prints it and keeps the menu open, marking the entry.
- `Escape`, `Ctrl-c`, `Ctrl-g`, `Ctrl-[` leave without printing.
- `Tab` copies the selected entry into the input.
- `Up`/`Down`, `Left`/`Right`, `Page Up`/`Page Down`, `Home`/`End` move the
  selection and the cursor.
- `Ctrl-a`, `Ctrl-e`, `Ctrl-b`, `Ctrl-f`, `Ctrl-h`, `Ctrl-d`, `Ctrl-n`, `Ctrl-p`,
  `Ctrl-i` behave as Home, End, Left, Right, Backspace, Delete, Down, Up and Tab;
  `Ctrl-j` and `Ctrl-m` as Return.
- `Ctrl-k` deletes to the end of the input, `Ctrl-u` to its start,
  `Ctrl-w` the word before the cursor.
- `Ctrl-Left`/`Ctrl-Right` and `Alt-b`/`Alt-f` jump by words.
- `Alt-g`/`Alt-G` go to the first/last entry, `Alt-h`/`Alt-l` move up/down,
  `Alt-j`/`Alt-k` page forward/back.
- `Ctrl-y` pastes the first line of the primary selection, `Ctrl-Shift-y`
  that of the clipboard.

### What the menu does not do

- It always appears centred on the whole screen area Tk reports. The
  command line has no way to turn centring off, so `-b`, `-x`, `-y` and
  `-w` have no visible effect there; they apply only when an `Options`
  with `centered=False` is built in Python.
- It does not pick a monitor: `-m` is parsed but the window is not placed
  by it. `pickmenu.layout.choose_screen` holds the selection rule for
  callers that know their monitors.
- It cannot be embedded in another window.
- Standard input is always read in full before the keyboard is grabbed;
  `-f` is accepted but does not change that order.

## Using it from Python

- `pickmenu.menu.Menu` holds the typed text, cursor, matches, selection and
  paging. `Menu.press(key, char, ctrl, alt, shift)` takes a `Key` or a
  character and returns an `Action` and, for `SELECT` and `EMIT`, the line
  to print.
- `pickmenu.matching.match_items(items, text, case_insensitive)` gives the
  filtered, ordered entries.
- `pickmenu.config.parse_args(argv)` turns the options above into an
  `Options` dataclass.
- `pickmenu.layout.compute_geometry` and `pickmenu.layout.ellipsize` place
  the window and shorten text to a width.
- `pickmenu.utf8.decode` and `pickmenu.utf8.next_rune` decode and step over
  UTF-8 byte strings.

## Filtering files with pickmenu-stest

```
pickmenu-stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]
```

Each file named on the command line, or each line of standard input when
none is named, is printed if it passes every test given:

| Flag | Test                                       |
|------|--------------------------------------------|
| `-a` | include hidden files (names starting `.`)  |
| `-b` | block special file                         |
| `-c` | character special file                     |
| `-d` | directory                                  |
| `-e` | exists                                     |
| `-f` | regular file                               |
| `-g` | set-group-id bit set                       |
| `-h` | symbolic link                              |
| `-l` | test the contents of directories instead   |
| `-n file` | modified later than `file`            |
| `-o file` | modified earlier than `file`          |
| `-p` | named pipe                                 |
| `-q` | print nothing, exit 0 at the first match   |
| `-r` | readable                                   |
| `-s` | not empty                                  |
| `-u` | set-user-id bit set                        |
| `-v` | invert: print files that fail              |
| `-w` | writable                                   |
| `-x` | executable                                 |

If the file given to `-n` or `-o` cannot be examined, an error is printed
and that test is left out. With `-l`, the names printed for a directory's
contents are the entry names, `.` and `..` included.

It exits with 0 if any file matched, 1 if none did, and 2 on a usage
error. For example, to list the executables on your `PATH` as menu input:

```
echo "$PATH" | tr ':' '\n' | xargs pickmenu-stest -flx | sort -u | pickmenu
```