"""Per-view plugin state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set


@dataclass(frozen=True, slots=True)
class WordCountState:
    """Counts for one document; ``char_count`` is in UTF-8 bytes."""

    word_count: int = 0
    line_count: int = 0
    char_count: int = 0


@dataclass(slots=True)
class ViewSession:
    """State owned by a single open view, never shared between views."""

    view_id: str
    state: Optional[WordCountState] = None
    status_keys: Set[str] = field(default_factory=set)
    refreshes: int = 0


__all__ = ["ViewSession", "WordCountState"]
