"""printf-style formatting with colour tags, string helpers and a line reader."""

__version__ = "0.1.0"