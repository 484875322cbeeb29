from __future__ import annotations

from typing import List, Tuple

from docstats.adapters import WordCountPlugin
from docstats.adapters.textual import StatsUIHooks, TextualStatsAdapter, diff_texts
from docstats.host import Interval
from docstats.host.memory import Location

Replacement = Tuple[Location, Location, str]


def make_adapter(
    text: str = "",
) -> Tuple[TextualStatsAdapter, List[Replacement], List[str], List[str]]:
    replacements: List[Replacement] = []
    statuses: List[str] = []
    logs: List[str] = []
    hooks = StatsUIHooks(
        replace_range=lambda start, end, new: replacements.append((start, end, new)),
        update_status=statuses.append,
        log=logs.append,
    )
    adapter = TextualStatsAdapter(WordCountPlugin(), hooks, text=text)
    return adapter, replacements, statuses, logs


def test_diff_texts_single_insertion() -> None:
    delta = diff_texts("hello world", "hello world!")

    assert delta is not None
    assert delta.as_simple_insert() == "!"
    assert delta.summary()[0] == Interval(11, 11)


def test_diff_texts_uses_byte_offsets() -> None:
    delta = diff_texts("héllo", "hé-llo")

    assert delta is not None
    assert delta.changes[0].interval == Interval(3, 3)
    assert delta.changes[0].text == "-"


def test_diff_texts_replacement_and_no_change() -> None:
    assert diff_texts("same", "same") is None

    delta = diff_texts("abcdef", "abXYef")
    assert delta is not None
    assert delta.changes[0].interval == Interval(2, 4)
    assert delta.changes[0].text == "XY"


def test_adapter_shows_initial_counts() -> None:
    _adapter, _replacements, statuses, _logs = make_adapter("one two\nthree")

    assert statuses[-1] == "Words: 3  |  Lines: 2  |  Chars: 13"


def test_typing_bang_pushes_capitalization_back_to_widget() -> None:
    adapter, replacements, statuses, logs = make_adapter("first line\nhello world")

    adapter.handle_text_changed("first line\nhello world!")

    assert replacements == [((1, 6), (1, 11), "WORLD")]
    assert adapter.text == "first line\nhello WORLD!"
    assert statuses[-1] == "Words: 4  |  Lines: 2  |  Chars: 23"
    assert any(line.startswith("plugin edit ->") for line in logs)

    # The widget echoes the replacement back as another change event.
    assert adapter.handle_text_changed("first line\nhello WORLD!") is None


def test_paste_updates_counts_without_edits() -> None:
    adapter, replacements, statuses, _logs = make_adapter("say ")

    adapter.handle_text_changed("say hi! there")

    assert replacements == []
    assert statuses[-1].startswith("Words: 3")


def test_close_discards_the_session() -> None:
    adapter, _replacements, _statuses, _logs = make_adapter("text")

    adapter.close()

    assert adapter.view.view_id not in adapter.plugin.sessions


def test_merged_keystrokes_do_not_trigger_capitalization() -> None:
    adapter, replacements, _statuses, _logs = make_adapter("hello world")

    delta = adapter.handle_text_changed("hello worldx!")

    assert delta is not None
    assert delta.as_simple_insert() == "x!"
    assert replacements == []
    assert adapter.text == "hello worldx!"


def test_separate_keystrokes_trigger_capitalization() -> None:
    adapter, replacements, _statuses, _logs = make_adapter("hello world")

    adapter.handle_text_changed("hello worldx")
    adapter.handle_text_changed("hello worldx!")

    assert replacements == [((0, 6), (0, 12), "WORLDX")]
    assert adapter.text == "hello WORLDX!"
