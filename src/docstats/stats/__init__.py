"""Tokenization, statistics and status bar publishing."""

from .engine import StatisticsEngine
from .status import CHARS_KEY, LINES_KEY, WORDS_KEY, StatusPublisher, status_entries
from .tokenizer import (
    RegexTokenizer,
    Tokenizer,
    WhitespaceTokenizer,
    count_words,
    get_tokenizer,
    tokenizer_names,
)

__all__ = [
    "CHARS_KEY",
    "LINES_KEY",
    "RegexTokenizer",
    "StatisticsEngine",
    "StatusPublisher",
    "Tokenizer",
    "WORDS_KEY",
    "WhitespaceTokenizer",
    "count_words",
    "get_tokenizer",
    "status_entries",
    "tokenizer_names",
]
