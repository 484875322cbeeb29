"""Widget-agnostic controller that lets a Textual text area host the plugin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from docstats.adapters.plugin import WordCountPlugin
from docstats.host.delta import DeltaBuilder, EditDelta, Interval
from docstats.host.memory import Location, MemoryView


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class StatsUIHooks:
    """Callbacks the controller uses to reach the widgets."""

    replace_range: Callable[[Location, Location, str], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def diff_texts(old: str, new: str) -> Optional[EditDelta]:
    """Describe ``old -> new`` as one replacement, or ``None`` if unchanged."""

    if old == new:
        return None

    limit = min(len(old), len(new))
    prefix = 0
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1
    suffix = 0
    while (
        suffix < limit - prefix
        and old[len(old) - 1 - suffix] == new[len(new) - 1 - suffix]
    ):
        suffix += 1

    start = len(old[:prefix].encode("utf-8"))
    end = len(old[: len(old) - suffix].encode("utf-8"))
    builder = DeltaBuilder(len(old.encode("utf-8")))
    builder.replace(Interval(start, end), new[prefix : len(new) - suffix])
    return builder.build()


class TextualStatsAdapter:
    """Mirrors widget text into a ``MemoryView`` and plays host for the plugin.

    Every widget change becomes a delta; edits the plugin submits are applied
    to the mirror, pushed back to the widget and then announced to the plugin
    as a new notification.
    """

    def __init__(
        self,
        plugin: WordCountPlugin,
        hooks: StatsUIHooks,
        *,
        text: str = "",
        view_id: str = "textual-view-1",
    ) -> None:
        self.plugin = plugin
        self.hooks = hooks
        self.view = MemoryView(text, view_id=view_id)
        self.plugin.on_view_opened(self.view)
        self._refresh_status()

    @property
    def text(self) -> str:
        return self.view.text

    def handle_text_changed(self, text: str) -> Optional[EditDelta]:
        delta = diff_texts(self.view.text, text)
        if delta is None:
            return None

        self.view.apply(delta)
        self._log("edit ->", delta)
        self.plugin.on_edit_applied(self.view, delta, "insert", "user")
        self._flush_pending_edits()
        self._refresh_status()
        return delta

    def save(self, path: Optional[str] = None) -> None:
        self.plugin.on_saved(self.view, path)

    def close(self) -> None:
        self.plugin.on_view_closed(self.view)

    def status_text(self) -> str:
        return "  |  ".join(item.text for item in self.view.status_items.values())

    def _flush_pending_edits(self) -> None:
        pending = self.view.take_pending_edits()
        while pending:
            submitted = pending.pop(0)
            delta = submitted.delta
            if delta.base_len != self.view.get_buf_size():
                self.hooks.log(f"edit rejected: stale base ({submitted.author})")
                continue

            ranges = self._widget_ranges(delta)
            self.view.apply(delta)
            for start, end, replacement in reversed(ranges):
                self.hooks.replace_range(start, end, replacement)
            self._log("plugin edit ->", delta)
            self.plugin.on_edit_applied(self.view, delta, "other", submitted.author)
            pending.extend(self.view.take_pending_edits())

    def _widget_ranges(self, delta: EditDelta) -> List[Tuple[Location, Location, str]]:
        return [
            (
                self.view.location_of_offset(change.interval.start),
                self.view.location_of_offset(change.interval.end),
                change.text,
            )
            for change in delta.changes
        ]

    def _refresh_status(self) -> None:
        self.hooks.update_status(self.status_text())

    def _log(self, prefix: str, delta: EditDelta) -> None:
        interval, new_len = delta.summary()
        self.hooks.log(
            f"{prefix} view={self.view.view_id!r} interval=[{interval.start}, "
            f"{interval.end}) new_len={new_len} version={self.view.version}"
        )


__all__ = ["StatsUIHooks", "TextualStatsAdapter", "diff_texts"]
