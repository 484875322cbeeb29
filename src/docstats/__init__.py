"""Live document statistics and bang-capitalization for text editors."""

__all__ = [
    "adapters",
    "config",
    "host",
    "runtime",
    "session",
    "stats",
    "transforms",
]

__version__ = "0.1.0"
