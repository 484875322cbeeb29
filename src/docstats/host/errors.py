"""Error kinds raised by host views."""

from __future__ import annotations


class HostError(RuntimeError):
    """Base class for failures reported by the host editor."""


class HostQueryError(HostError):
    """A query against the document failed; callers may abandon and move on."""


class OffsetOutOfRange(HostQueryError):
    def __init__(self, offset: int, *, size: int | None = None) -> None:
        limit = f" (buffer size {size})" if size is not None else ""
        super().__init__(f"Offset {offset} out of range{limit}")
        self.offset = offset
        self.size = size


class LineOutOfRange(HostQueryError):
    def __init__(self, line: int, *, line_count: int | None = None) -> None:
        limit = f" (line count {line_count})" if line_count is not None else ""
        super().__init__(f"Line {line} out of range{limit}")
        self.line = line
        self.line_count = line_count


class IOFailure(HostQueryError):
    """Fetching a chunk of the document from the host failed."""


class TransportError(HostError):
    """The link to the host is gone. Never handled inside the core."""


class DeltaError(ValueError):
    """Raised when an edit delta is constructed with invalid intervals."""


__all__ = [
    "DeltaError",
    "HostError",
    "HostQueryError",
    "IOFailure",
    "LineOutOfRange",
    "OffsetOutOfRange",
    "TransportError",
]
