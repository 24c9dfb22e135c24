"""Order intake API: JSON-file backed order store with an admin surface."""

__version__ = "1.0.0"
