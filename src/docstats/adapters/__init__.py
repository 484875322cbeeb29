"""Host adapters wiring the core into editors."""

from .plugin import WordCountPlugin

__all__ = ["WordCountPlugin"]
