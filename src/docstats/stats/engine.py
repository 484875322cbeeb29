"""Whole-document word/line/character statistics for a host view."""

from __future__ import annotations

from typing import Optional

from docstats.config import CountStrategy
from docstats.host.delta import Interval
from docstats.host.errors import HostQueryError
from docstats.host.protocol import HostView
from docstats.runtime import telemetry
from docstats.runtime.diagnostics import DiagnosticSink, Outcome, TelemetrySink
from docstats.session import ViewSession, WordCountState

from .status import StatusPublisher
from .tokenizer import Tokenizer, count_words


class StatisticsEngine:
    """Recomputes a view's counts from scratch and republishes them.

    Nothing is published until every query has succeeded, so a failed
    refresh leaves the previous counts on screen.
    """

    def __init__(
        self,
        *,
        tokenizer: Optional[Tokenizer] = None,
        strategy: CountStrategy = CountStrategy.LINES,
        publisher: Optional[StatusPublisher] = None,
        sink: Optional[DiagnosticSink] = None,
        logger_name: str | None = None,
    ) -> None:
        self.tokenizer: Tokenizer = tokenizer or count_words
        self.strategy = strategy
        self.publisher = publisher or StatusPublisher()
        self.sink: DiagnosticSink = sink or TelemetrySink(logger_name=logger_name)
        self._logger_name = logger_name

    def refresh(self, view: HostView, session: ViewSession) -> Outcome[WordCountState]:
        with telemetry.span(
            "stats::refresh",
            logger_name=self._logger_name,
            component="stats",
            metadata={"view": session.view_id, "strategy": self.strategy.value},
        ) as handle:
            try:
                state = self.measure(view)
            except HostQueryError as exc:
                handle.abort(str(exc))
                self.sink.report("stats.refresh", exc, view=session.view_id)
                return Outcome.failure(exc)

            session.state = state
            session.refreshes += 1
            self.publisher.publish(view, session, state)
            handle.add_metadata("words", state.word_count)
            return Outcome.success(state)

    def measure(self, view: HostView) -> WordCountState:
        """Compute counts without touching any session or status item."""

        size = view.get_buf_size()
        last_line = view.line_of_offset(size)
        if self.strategy is CountStrategy.REGION:
            words = self.tokenizer(view.get_region(Interval(0, size)))
        else:
            words = sum(
                self.tokenizer(view.get_line(line)) for line in range(last_line + 1)
            )
        return WordCountState(
            word_count=words, line_count=last_line + 1, char_count=size
        )


__all__ = ["StatisticsEngine"]
