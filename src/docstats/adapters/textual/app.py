"""Textual demo editor hosting the word count plugin."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the demo is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use docstats.adapters.textual.app"
    ) from exc

from docstats.adapters.plugin import WordCountPlugin
from docstats.config import PluginSettings
from docstats.host.memory import Location
from docstats.runtime import telemetry

from .controller import StatsUIHooks, TextualStatsAdapter


class DocStatsApp(App[None]):
    """A text area with live counts in the status line."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+s", "save", "Save"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, path: Optional[Path] = None, text: str = "") -> None:
        super().__init__()
        self.path = path
        self._initial_text = text
        self.adapter: TextualStatsAdapter | None = None
        self._editor: TextArea | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._editor = TextArea(self._initial_text, id="editor")
        yield self._editor
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = StatsUIHooks(
            replace_range=self._replace_range,
            update_status=self._update_status,
            log=self._log_line,
        )
        plugin = WordCountPlugin(settings=PluginSettings.from_env())
        self.adapter = TextualStatsAdapter(
            plugin, hooks, text=self._initial_text, view_id=str(self.path or "untitled")
        )
        if self._editor:
            self._editor.focus()

    def on_unmount(self) -> None:
        if self.adapter:
            self.adapter.close()
            self.adapter = None

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        # Changed carries no per-edit data. Keystrokes queued before this runs
        # arrive as one multi-character delta, and a `!` among them is not a
        # single-character insert.
        if self.adapter:
            self.adapter.handle_text_changed(event.text_area.text)

    def action_save(self) -> None:
        if not (self.adapter and self.path):
            self._update_status("No file to save to")
            return
        self.path.write_text(self.adapter.text, encoding="utf-8")
        self.adapter.save(str(self.path))
        self._update_status(f"Saved {self.path}")

    def _replace_range(self, start: Location, end: Location, text: str) -> None:
        if self._editor:
            self._editor.replace(text, start, end)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("docstats.textual").debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the docstats Textual demo.")
    parser.add_argument("path", nargs="?", type=Path, help="File to open")
    parser.add_argument(
        "--log-file",
        default=os.environ.get("DOCSTATS_LOG_FILE"),
        help="Write telemetry to this file instead of discarding it",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_file:
        os.environ["DOCSTATS_LOG_FILE"] = args.log_file
        telemetry.configure(preset="production")
    else:
        telemetry.configure(preset="quiet")

    text = ""
    if args.path and args.path.exists():
        text = args.path.read_text(encoding="utf-8")
    DocStatsApp(path=args.path, text=text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
