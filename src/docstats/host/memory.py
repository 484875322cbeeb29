"""In-process host view backed by a UTF-8 byte buffer.

``MemoryView`` plays the editor's part for tests and the demo host: it answers
offset/line queries, queues submitted edits until the host loop applies them,
and keeps status items in a dict keyed like the editor's status bar.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .delta import EditDelta, Interval
from .errors import LineOutOfRange, OffsetOutOfRange

Location = Tuple[int, int]  # (line, column in characters)


@dataclass(slots=True)
class SubmittedEdit:
    delta: EditDelta
    priority: int
    after_cursor: bool
    author: str


@dataclass(slots=True)
class StatusItem:
    key: str
    text: str
    alignment: str = "left"


def _index_lines(data: bytes) -> List[int]:
    starts = [0]
    position = data.find(b"\n")
    while position != -1:
        starts.append(position + 1)
        position = data.find(b"\n", position + 1)
    return starts


def _is_boundary(data: bytes, offset: int) -> bool:
    if offset >= len(data):
        return True
    return (data[offset] & 0xC0) != 0x80


class MemoryView:
    def __init__(self, text: str = "", *, view_id: str = "view-id-1") -> None:
        self._view_id = view_id
        self._data = text.encode("utf-8")
        self._line_starts = _index_lines(self._data)
        self.version = 0
        self.status_items: Dict[str, StatusItem] = {}
        self.status_log: List[Tuple[str, str]] = []
        self.pending_edits: List[SubmittedEdit] = []

    @property
    def view_id(self) -> str:
        return self._view_id

    @property
    def text(self) -> str:
        return self._data.decode("utf-8")

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def get_buf_size(self) -> int:
        return len(self._data)

    def line_of_offset(self, offset: int) -> int:
        if offset < 0 or offset > len(self._data):
            raise OffsetOutOfRange(offset, size=len(self._data))
        return bisect_right(self._line_starts, offset) - 1

    def offset_of_line(self, line: int) -> int:
        if line < 0 or line >= len(self._line_starts):
            raise LineOutOfRange(line, line_count=len(self._line_starts))
        return self._line_starts[line]

    def get_line(self, line: int) -> str:
        start = self.offset_of_line(line)
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1]
        else:
            end = len(self._data)
        return self._data[start:end].decode("utf-8")

    def get_region(self, interval: Interval) -> str:
        for offset in (interval.start, interval.end):
            if offset > len(self._data) or not _is_boundary(self._data, offset):
                raise OffsetOutOfRange(offset, size=len(self._data))
        return self._data[interval.start : interval.end].decode("utf-8")

    def edit(
        self, delta: EditDelta, priority: int, after_cursor: bool, author: str
    ) -> None:
        self.pending_edits.append(
            SubmittedEdit(
                delta=delta, priority=priority, after_cursor=after_cursor, author=author
            )
        )

    def add_status_item(self, key: str, text: str, alignment: str) -> None:
        self.status_log.append(("add", key))
        self.status_items[key] = StatusItem(key=key, text=text, alignment=alignment)

    def update_status_item(self, key: str, text: str) -> None:
        self.status_log.append(("update", key))
        item = self.status_items.get(key)
        if item is not None:
            item.text = text

    def apply(self, delta: EditDelta) -> None:
        """Apply ``delta`` as the host would once it accepts an edit."""

        self._data = delta.apply(self._data)
        self._line_starts = _index_lines(self._data)
        self.version += 1

    def take_pending_edits(self) -> List[SubmittedEdit]:
        edits, self.pending_edits = self.pending_edits, []
        return edits

    def location_of_offset(self, offset: int) -> Location:
        line = self.line_of_offset(offset)
        start = self._line_starts[line]
        if not _is_boundary(self._data, offset):
            raise OffsetOutOfRange(offset, size=len(self._data))
        return line, len(self._data[start:offset].decode("utf-8"))


__all__ = ["Location", "MemoryView", "StatusItem", "SubmittedEdit"]
