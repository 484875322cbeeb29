"""Byte-offset intervals and edit deltas exchanged with the host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import DeltaError


@dataclass(frozen=True, slots=True)
class Interval:
    """Half-open ``[start, end)`` range of UTF-8 byte offsets."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise DeltaError(f"Invalid interval [{self.start}, {self.end})")

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Change:
    """Replace ``interval`` of the base document with ``text``."""

    interval: Interval
    text: str

    @property
    def encoded(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass(frozen=True, slots=True)
class EditDelta:
    """One atomic mutation: ordered, non-overlapping changes over ``base_len`` bytes."""

    base_len: int
    changes: Tuple[Change, ...] = ()

    @property
    def is_simple_insert(self) -> bool:
        if len(self.changes) != 1:
            return False
        change = self.changes[0]
        return change.interval.is_empty and bool(change.text)

    def as_simple_insert(self) -> Optional[str]:
        """Return the inserted text when the delta is a pure insertion."""

        if self.is_simple_insert:
            return self.changes[0].text
        return None

    def summary(self) -> Tuple[Interval, int]:
        """Return the base interval touched by the delta and the new length."""

        if not self.changes:
            return Interval(0, 0), self.base_len
        start = self.changes[0].interval.start
        end = self.changes[-1].interval.end
        new_len = self.base_len
        for change in self.changes:
            new_len += len(change.encoded) - change.interval.length
        return Interval(start, end), new_len

    def apply(self, data: bytes) -> bytes:
        if len(data) != self.base_len:
            raise DeltaError(
                f"Delta expects {self.base_len} bytes, document has {len(data)}"
            )
        pieces: List[bytes] = []
        cursor = 0
        for change in self.changes:
            pieces.append(data[cursor : change.interval.start])
            pieces.append(change.encoded)
            cursor = change.interval.end
        pieces.append(data[cursor:])
        return b"".join(pieces)


class DeltaBuilder:
    """Accumulates replacements over a document of ``base_len`` bytes."""

    def __init__(self, base_len: int) -> None:
        self.base_len = base_len
        self._changes: List[Change] = []

    def replace(self, interval: Interval, text: str) -> "DeltaBuilder":
        if interval.end > self.base_len:
            raise DeltaError(
                f"Interval [{interval.start}, {interval.end}) "
                f"exceeds {self.base_len} bytes"
            )
        if self._changes and interval.start < self._changes[-1].interval.end:
            raise DeltaError("Changes must be added in order without overlap")
        self._changes.append(Change(interval=interval, text=text))
        return self

    def insert(self, offset: int, text: str) -> "DeltaBuilder":
        return self.replace(Interval(offset, offset), text)

    def delete(self, interval: Interval) -> "DeltaBuilder":
        return self.replace(interval, "")

    def build(self) -> EditDelta:
        return EditDelta(base_len=self.base_len, changes=tuple(self._changes))


__all__ = ["Change", "DeltaBuilder", "EditDelta", "Interval"]
