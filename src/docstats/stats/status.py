"""Status bar entries for word/line/character counts."""

from __future__ import annotations

from typing import Tuple

from docstats.config import StatusAlignment
from docstats.host.protocol import StatusSurface
from docstats.session import ViewSession, WordCountState

WORDS_KEY = "docstats.words"
LINES_KEY = "docstats.lines"
CHARS_KEY = "docstats.chars"


def status_entries(state: WordCountState) -> Tuple[Tuple[str, str], ...]:
    return (
        (WORDS_KEY, f"Words: {state.word_count}"),
        (LINES_KEY, f"Lines: {state.line_count}"),
        (CHARS_KEY, f"Chars: {state.char_count}"),
    )


class StatusPublisher:
    """Creates each status item once per view, then updates it in place."""

    def __init__(self, alignment: StatusAlignment = StatusAlignment.LEFT) -> None:
        self.alignment = alignment

    def publish(
        self, surface: StatusSurface, session: ViewSession, state: WordCountState
    ) -> None:
        for key, text in status_entries(state):
            if key in session.status_keys:
                surface.update_status_item(key, text)
            else:
                surface.add_status_item(key, text, self.alignment.value)
                session.status_keys.add(key)


__all__ = ["CHARS_KEY", "LINES_KEY", "StatusPublisher", "WORDS_KEY", "status_entries"]
