"""Fatal error reporting shared by the menu program."""

import sys


class MenuError(Exception):
    """A fatal condition that ends the program with exit status 1."""

    exit_status = 1


def die(message):
    """Raise MenuError with *message*.

    When the message ends with ':' and an OSError is being handled, the
    system's description of that error is appended after a space.
    """
    if message.endswith(":"):
        current = sys.exc_info()[1]
        if isinstance(current, OSError) and current.strerror:
            message = f"{message} {current.strerror}"
    raise MenuError(message)