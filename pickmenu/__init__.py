"""A keyboard-driven menu that prints the chosen line, and a file-test filter."""

__version__ = "1.0.0"