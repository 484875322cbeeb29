"""Uppercase the word in front of a freshly typed ``!``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from docstats.host.delta import DeltaBuilder, EditDelta, Interval
from docstats.host.errors import HostQueryError
from docstats.host.protocol import HostView
from docstats.runtime import telemetry
from docstats.runtime.diagnostics import DiagnosticSink, Outcome, TelemetrySink

TRIGGER = "!"


@dataclass(frozen=True, slots=True)
class EditTag:
    """Priority/author pair handed to the host untouched."""

    priority: int = 0
    author: str = "docstats"
    after_cursor: bool = False


def word_start_before(line: str, line_start: int, trigger: int) -> int:
    """Return the line-relative byte offset where the word ending at ``trigger`` starts.

    Walks ``line`` from ``line_start`` in UTF-8 bytes. Each whitespace
    character moves the candidate start just past itself; the walk stops once
    the running document offset reaches ``trigger``.
    """

    cursor = 0
    word_start = 0
    for char in line:
        if line_start + cursor >= trigger:
            break
        cursor += len(char.encode("utf-8"))
        if char.isspace():
            word_start = cursor
    return word_start


class CapitalizationTransform:
    """Turns ``hello world`` + ``!`` into ``hello WORLD!``.

    Only a delta that inserts exactly ``"!"`` and deletes nothing triggers
    the transform. The corrective edit covers the word before the ``!``; the
    ``!`` itself is left alone.
    """

    def __init__(
        self,
        *,
        tag: Optional[EditTag] = None,
        sink: Optional[DiagnosticSink] = None,
        logger_name: str | None = None,
    ) -> None:
        self.tag = tag or EditTag()
        self.sink: DiagnosticSink = sink or TelemetrySink(logger_name=logger_name)
        self._logger_name = logger_name

    @staticmethod
    def is_trigger(delta: Optional[EditDelta]) -> bool:
        return delta is not None and delta.as_simple_insert() == TRIGGER

    def on_edit(
        self, view: HostView, delta: Optional[EditDelta]
    ) -> Outcome[Optional[EditDelta]]:
        if not self.is_trigger(delta):
            return Outcome.success(None)
        assert delta is not None

        trigger, _ = delta.summary()
        with telemetry.span(
            "transform::capitalize",
            logger_name=self._logger_name,
            component="transforms",
            metadata={"view": view.view_id, "offset": trigger.end},
        ) as handle:
            try:
                edit = self.build_edit(view, trigger.end)
            except HostQueryError as exc:
                handle.abort(str(exc))
                self.sink.report(
                    "transform.capitalize", exc, view=view.view_id, offset=trigger.end
                )
                return Outcome.failure(exc)

            if edit is None:
                handle.add_metadata("result", "noop")
                return Outcome.success(None)

            view.edit(edit, self.tag.priority, self.tag.after_cursor, self.tag.author)
            handle.add_metadata("result", "submitted")
            return Outcome.success(edit)

    def build_edit(self, view: HostView, trigger: int) -> Optional[EditDelta]:
        """Return the uppercase replacement for the word before ``trigger``, if any."""

        line_nb = view.line_of_offset(trigger)
        line_start = view.offset_of_line(line_nb)
        line = view.get_line(line_nb)

        word_start = word_start_before(line, line_start, trigger)
        span = Interval(min(line_start + word_start, trigger), trigger)
        if span.is_empty:
            return None

        original = view.get_region(span)
        upper = original.upper()
        if upper == original:
            return None

        builder = DeltaBuilder(view.get_buf_size())
        builder.replace(span, upper)
        return builder.build()


__all__ = ["CapitalizationTransform", "EditTag", "TRIGGER", "word_start_before"]
