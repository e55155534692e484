"""findr - find filesystem entries by type and name."""

__version__ = "0.1.0"
