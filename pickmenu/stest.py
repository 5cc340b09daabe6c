"""Filter a list of files by properties, in the manner of test(1)."""

import os
import stat
import sys
from dataclasses import dataclass, field

FLAG_CHARS = "abcdefghlpqrsuvwx"
PROGRAM = "stest"
USAGE = f"usage: {PROGRAM} [-{FLAG_CHARS}] [-n file] [-o file] [file...]"
_PATH_MAX = 4096


class UsageError(Exception):
    """The command line could not be understood."""


@dataclass
class Options:
    """Selected tests; reference times are modification times in seconds."""

    flags: set = field(default_factory=set)
    newer_than: int | None = None
    older_than: int | None = None


def _mtime(st):
    return st.st_mtime_ns // 1_000_000_000


def _reference_time(path):
    try:
        return _mtime(os.stat(path))
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        return None


def parse_args(argv):
    """Parse *argv* (without the program name) into options and operands."""
    args = list(argv)
    options = Options()
    index = 0
    while index < len(args):
        arg = args[index]
        if not arg.startswith("-") or len(arg) < 2:
            break
        index += 1
        if arg == "--":
            break
        for pos, flag in enumerate(arg[1:], start=1):
            if flag in "no":
                rest = arg[pos + 1:]
                if rest:
                    value = rest
                elif index < len(args):
                    value = args[index]
                    index += 1
                else:
                    raise UsageError(USAGE)
                mtime = _reference_time(value)
                if flag == "n":
                    options.newer_than = mtime
                else:
                    options.older_than = mtime
                break
            if flag not in FLAG_CHARS:
                raise UsageError(USAGE)
            options.flags.add(flag)
    return options, args[index:]


def _all_tests_hold(path, name, options):
    has = options.flags.__contains__
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    mode = st.st_mode
    if not has("a") and name.startswith("."):
        return False
    if has("b") and not stat.S_ISBLK(mode):
        return False
    if has("c") and not stat.S_ISCHR(mode):
        return False
    if has("d") and not stat.S_ISDIR(mode):
        return False
    if has("e") and not os.access(path, os.F_OK):
        return False
    if has("f") and not stat.S_ISREG(mode):
        return False
    if has("g") and not mode & stat.S_ISGID:
        return False
    if has("h"):
        try:
            if not stat.S_ISLNK(os.lstat(path).st_mode):
                return False
        except OSError:
            return False
    if options.newer_than is not None and not _mtime(st) > options.newer_than:
        return False
    if options.older_than is not None and not _mtime(st) < options.older_than:
        return False
    if has("p") and not stat.S_ISFIFO(mode):
        return False
    if has("r") and not os.access(path, os.R_OK):
        return False
    if has("s") and not st.st_size > 0:
        return False
    if has("u") and not mode & stat.S_ISUID:
        return False
    if has("w") and not os.access(path, os.W_OK):
        return False
    if has("x") and not os.access(path, os.X_OK):
        return False
    return True


def passes(path, name, options):
    """Whether *path* (shown as *name*) is selected; -v inverts the result."""
    return _all_tests_hold(path, name, options) != ("v" in options.flags)


def _candidates(options, operands, stdin):
    if not operands:
        for line in stdin:
            line = line.removesuffix("\n")
            yield line, line
        return
    for operand in operands:
        if "l" in options.flags:
            try:
                entries = os.listdir(operand)
            except OSError:
                entries = None
            if entries is not None:
                for entry in [".", ".."] + entries:
                    path = f"{operand}/{entry}"
                    if len(os.fsencode(path)) < _PATH_MAX:
                        yield path, entry
                continue
        yield operand, operand


def run(options, operands, stdin, stdout):
    """Print the names of passing candidates; return the exit status."""
    matched = False
    for path, name in _candidates(options, operands, stdin):
        if passes(path, name, options):
            if "q" in options.flags:
                return 0
            matched = True
            print(name, file=stdout)
    return 0 if matched else 1


def main(argv=None):
    """Command entry point; returns 0 on a match, 1 on none, 2 on misuse."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options, operands = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 2
    return run(options, operands, sys.stdin, sys.stdout)