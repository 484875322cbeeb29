"""Host adapter: routes editor lifecycle notifications to per-view sessions."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from docstats.config import PluginSettings
from docstats.host.delta import EditDelta
from docstats.host.protocol import HostView
from docstats.runtime import telemetry
from docstats.runtime.diagnostics import DiagnosticSink, Outcome, TelemetrySink
from docstats.session import ViewSession, WordCountState
from docstats.stats import StatisticsEngine, StatusPublisher, Tokenizer, get_tokenizer
from docstats.transforms import CapitalizationTransform, EditTag


class WordCountPlugin:
    """Keeps live word counts per view and capitalizes words ended with ``!``.

    The host calls ``on_view_opened`` once per view and ``on_edit_applied``
    after every edit it accepts, including edits this plugin submitted.
    """

    def __init__(
        self,
        *,
        settings: Optional[PluginSettings] = None,
        tokenizer: Optional[Tokenizer] = None,
        sink: Optional[DiagnosticSink] = None,
        logger_name: str | None = None,
    ) -> None:
        self.settings = settings or PluginSettings()
        self.sink: DiagnosticSink = sink or TelemetrySink(logger_name=logger_name)
        self._logger_name = logger_name
        self.engine = StatisticsEngine(
            tokenizer=tokenizer or get_tokenizer(self.settings.tokenizer),
            strategy=self.settings.count_strategy,
            publisher=StatusPublisher(self.settings.status_alignment),
            sink=self.sink,
            logger_name=logger_name,
        )
        self.transform = CapitalizationTransform(
            tag=EditTag(
                priority=self.settings.edit_priority,
                author=self.settings.edit_author,
                after_cursor=self.settings.edit_after_cursor,
            ),
            sink=self.sink,
            logger_name=logger_name,
        )
        self.sessions: Dict[str, ViewSession] = {}

    def session_for(self, view: HostView) -> ViewSession:
        session = self.sessions.get(view.view_id)
        if session is None:
            session = ViewSession(view_id=view.view_id)
            self.sessions[view.view_id] = session
        return session

    def state_for(self, view_id: str) -> Optional[WordCountState]:
        session = self.sessions.get(view_id)
        return session.state if session else None

    def on_view_opened(self, view: HostView) -> Outcome[WordCountState]:
        session = self.session_for(view)
        self._record("view.opened", view)
        return self.engine.refresh(view, session)

    def on_edit_applied(
        self,
        view: HostView,
        delta: Optional[EditDelta],
        edit_kind: str,
        author: str,
    ) -> Outcome[Optional[EditDelta]]:
        """Refresh counts, then let the transform react to the same delta."""

        session = self.session_for(view)
        self._record("edit.applied", view, kind=edit_kind, author=author)
        self.engine.refresh(view, session)
        return self.transform.on_edit(view, delta)

    def on_view_closed(self, view: HostView) -> None:
        self.sessions.pop(view.view_id, None)
        self._record("view.closed", view)

    def on_saved(self, view: HostView, path: Optional[str] = None) -> None:
        self._record("view.saved", view, path=path or "")

    def on_config_changed(self, view: HostView, changes: Mapping[str, Any]) -> None:
        self._record("config.changed", view, keys=sorted(changes))

    def _record(self, name: str, view: HostView, **data: Any) -> None:
        telemetry.record_event(
            name,
            level="debug",
            data={"view": view.view_id, **data},
            logger_name=self._logger_name,
        )


__all__ = ["WordCountPlugin"]
