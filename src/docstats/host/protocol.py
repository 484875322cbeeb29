"""Protocols describing the host view the core talks to."""

from __future__ import annotations

from typing import Protocol

from .delta import EditDelta, Interval


class BufferAccessor(Protocol):
    """Read side of a host view. Offsets are UTF-8 byte offsets."""

    def get_buf_size(self) -> int:
        ...

    def line_of_offset(self, offset: int) -> int:
        """Raise ``OffsetOutOfRange`` when ``offset`` is past the buffer end."""
        ...

    def offset_of_line(self, line: int) -> int:
        """Raise ``LineOutOfRange`` for a line the buffer does not have."""
        ...

    def get_line(self, line: int) -> str:
        """Return the line text including its trailing newline, if any."""
        ...

    def get_region(self, interval: Interval) -> str:
        ...


class EditEmitter(Protocol):
    """Write side of a host view; the host decides later whether to accept."""

    def edit(
        self, delta: EditDelta, priority: int, after_cursor: bool, author: str
    ) -> None:
        ...


class StatusSurface(Protocol):
    def add_status_item(self, key: str, text: str, alignment: str) -> None:
        ...

    def update_status_item(self, key: str, text: str) -> None:
        ...


class HostView(BufferAccessor, EditEmitter, StatusSurface, Protocol):
    """Everything a plugin needs from one open view."""

    @property
    def view_id(self) -> str:
        ...


__all__ = ["BufferAccessor", "EditEmitter", "HostView", "StatusSurface"]
