"""Word tokenizers used by the statistics engine.

A tokenizer is any callable ``(text) -> int``. Both shipped tokenizers treat
``\\n`` as a separator, so counting line by line gives the same total as
counting the whole document at once.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Pattern, Protocol, Tuple

WORD_PATTERN = r"\w+"


class Tokenizer(Protocol):
    def __call__(self, text: str) -> int:
        ...


class RegexTokenizer:
    """Counts non-overlapping matches of ``pattern``."""

    def __init__(self, pattern: str | Pattern[str] = WORD_PATTERN) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def __call__(self, text: str) -> int:
        return sum(1 for _ in self.pattern.finditer(text))

    def __repr__(self) -> str:
        return f"RegexTokenizer({self.pattern.pattern!r})"


class WhitespaceTokenizer:
    """Counts whitespace-separated runs, the way ``str.split`` sees words."""

    def __call__(self, text: str) -> int:
        return len(text.split())

    def __repr__(self) -> str:
        return "WhitespaceTokenizer()"


_default = RegexTokenizer()


def count_words(text: str) -> int:
    """Count runs of Unicode word characters (letters, digits, underscore)."""

    return _default(text)


_FACTORIES: Dict[str, Callable[[], Tokenizer]] = {
    "word": RegexTokenizer,
    "whitespace": WhitespaceTokenizer,
}


def tokenizer_names() -> Tuple[str, ...]:
    return tuple(sorted(_FACTORIES))


def get_tokenizer(name: str) -> Tokenizer:
    try:
        factory = _FACTORIES[name.lower()]
    except KeyError as exc:
        known = ", ".join(tokenizer_names())
        raise ValueError(f"Unknown tokenizer '{name}' (known: {known})") from exc
    return factory()


__all__ = [
    "RegexTokenizer",
    "Tokenizer",
    "WhitespaceTokenizer",
    "WORD_PATTERN",
    "count_words",
    "get_tokenizer",
    "tokenizer_names",
]
