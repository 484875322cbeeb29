"""Runtime services: telemetry and failure reporting."""

from . import telemetry
from .diagnostics import DiagnosticSink, Outcome, TelemetrySink

__all__ = ["DiagnosticSink", "Outcome", "TelemetrySink", "telemetry"]
