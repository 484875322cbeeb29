"""Host-facing types: deltas, error kinds, view protocols and an in-memory view."""

from .delta import Change, DeltaBuilder, EditDelta, Interval
from .errors import (
    DeltaError,
    HostError,
    HostQueryError,
    IOFailure,
    LineOutOfRange,
    OffsetOutOfRange,
    TransportError,
)
from .memory import MemoryView, StatusItem, SubmittedEdit
from .protocol import BufferAccessor, EditEmitter, HostView, StatusSurface

__all__ = [
    "BufferAccessor",
    "Change",
    "DeltaBuilder",
    "DeltaError",
    "EditDelta",
    "EditEmitter",
    "HostError",
    "HostQueryError",
    "HostView",
    "IOFailure",
    "Interval",
    "LineOutOfRange",
    "MemoryView",
    "OffsetOutOfRange",
    "StatusItem",
    "StatusSurface",
    "SubmittedEdit",
    "TransportError",
]
