"""Filtering of menu items against the typed input."""

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(s):
    """Lower-case ASCII letters only, keeping the length of *s*."""
    return s.translate(_ASCII_LOWER)


def cistrstr(s, sub):
    """Index of the first case-insensitive occurrence of *sub* in *s*, or None.

    An empty *s* never contains anything, not even an empty *sub*.
    """
    if not s:
        return None
    index = _fold(s).find(_fold(sub))
    return index if index >= 0 else None


def tokenize(text):
    """Split *text* on spaces, dropping empty pieces."""
    return [token for token in text.split(" ") if token]


def match_items(items, text, case_insensitive=False):
    """Return the items that contain every token of *text*.

    Items are strings or objects whose ``str()`` is their label. Exact
    matches of the whole input come first, then items starting with the
    first token, then the rest; each group keeps the input order.
    """
    tokens = tokenize(text)
    if case_insensitive:
        def contains(label, token):
            return cistrstr(label, token) is not None

        def starts(label, prefix):
            return _fold(label).startswith(_fold(prefix))

        def equal(a, b):
            return _fold(a) == _fold(b)
    else:
        def contains(label, token):
            return token in label

        def starts(label, prefix):
            return label.startswith(prefix)

        def equal(a, b):
            return a == b

    exact, prefix, substring = [], [], []
    for item in items:
        label = str(item)
        if not all(contains(label, token) for token in tokens):
            continue
        if not tokens or equal(text, label):
            exact.append(item)
        elif starts(label, tokens[0]):
            prefix.append(item)
        else:
            substring.append(item)
    return exact + prefix + substring