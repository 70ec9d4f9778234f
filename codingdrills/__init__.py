"""Classic algorithm drills as small, self-contained Python functions."""

__version__ = "0.1.0"