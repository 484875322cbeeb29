"""Result type and failure sink for operations that must never raise to the host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, TypeVar

from . import telemetry

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Value of a recoverable operation, or the error that aborted it."""

    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> "Outcome[T]":
        return cls(error=error)


class DiagnosticSink(Protocol):
    def report(self, operation: str, error: Exception, **context: Any) -> None:
        ...


class TelemetrySink:
    """Writes abandoned operations to the telelog event stream."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name

    def report(self, operation: str, error: Exception, **context: Any) -> None:
        telemetry.record_event(
            f"{operation}.aborted",
            level="warning",
            data={"error": type(error).__name__, "detail": str(error), **context},
            logger_name=self._logger_name,
        )


__all__ = ["DiagnosticSink", "Outcome", "TelemetrySink"]
