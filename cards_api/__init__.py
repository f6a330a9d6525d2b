"""File-backed trading card catalogue API."""

__version__ = "1.0.0"
