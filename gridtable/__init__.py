"""Text tables with borders, alignment, width constraints and content wrapping."""

__version__ = "0.1.0"