"""Textual host for the word count plugin."""

from .controller import StatsUIHooks, TextualStatsAdapter, diff_texts

__all__ = ["StatsUIHooks", "TextualStatsAdapter", "diff_texts"]
