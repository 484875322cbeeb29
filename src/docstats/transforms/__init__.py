"""Automatic edits derived from incoming deltas."""

from .capitalize import TRIGGER, CapitalizationTransform, EditTag, word_start_before

__all__ = ["CapitalizationTransform", "EditTag", "TRIGGER", "word_start_before"]
