"""Jump to directories by name, ranked by visit count and recency."""

__version__ = "0.1.0"