"""A terminal banking system with accounts stored as JSON."""

__version__ = "1.0.0"