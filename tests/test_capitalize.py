from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pytest

from docstats.host import (
    DeltaBuilder,
    EditDelta,
    Interval,
    LineOutOfRange,
    MemoryView,
    TransportError,
)
from docstats.transforms import CapitalizationTransform, EditTag, word_start_before


class RecordingSink:
    def __init__(self) -> None:
        self.reports: List[Tuple[str, Exception, dict[str, Any]]] = []

    def report(self, operation: str, error: Exception, **context: Any) -> None:
        self.reports.append((operation, error, context))


def make_transform(**kwargs: Any) -> Tuple[CapitalizationTransform, RecordingSink]:
    sink = RecordingSink()
    return CapitalizationTransform(sink=sink, **kwargs), sink


def type_text(view: MemoryView, offset: int, text: str) -> EditDelta:
    """Insert ``text`` at ``offset`` the way the host does before notifying."""

    delta = DeltaBuilder(view.get_buf_size()).insert(offset, text).build()
    view.apply(delta)
    return delta


def type_bang(text: str, offset: Optional[int] = None) -> Tuple[MemoryView, EditDelta]:
    view = MemoryView(text)
    position = view.get_buf_size() if offset is None else offset
    return view, type_text(view, position, "!")


def apply_submitted(view: MemoryView) -> None:
    for submitted in view.take_pending_edits():
        view.apply(submitted.delta)


def test_word_before_bang_is_uppercased() -> None:
    transform, _ = make_transform()
    view, delta = type_bang("hello world")

    outcome = transform.on_edit(view, delta)
    apply_submitted(view)

    assert outcome.ok
    assert outcome.value is not None
    assert outcome.value.changes[0].interval == Interval(6, 11)
    assert view.text == "hello WORLD!"


def test_bang_alone_on_line_is_noop() -> None:
    transform, _ = make_transform()
    view, delta = type_bang("")

    outcome = transform.on_edit(view, delta)

    assert outcome.ok
    assert outcome.value is None
    assert view.pending_edits == []
    assert view.text == "!"


def test_repeated_whitespace_tracks_last_space() -> None:
    assert word_start_before("a   !", 0, 4) == 4

    transform, _ = make_transform()
    view, delta = type_bang("a   ")

    outcome = transform.on_edit(view, delta)

    assert outcome.value is None
    assert view.pending_edits == []


def test_paste_containing_bang_does_not_trigger() -> None:
    transform, _ = make_transform()
    view = MemoryView("say ")
    delta = type_text(view, 4, "hi!")

    outcome = transform.on_edit(view, delta)

    assert outcome.value is None
    assert view.pending_edits == []


@pytest.mark.parametrize(
    "delta",
    [
        None,
        DeltaBuilder(5).replace(Interval(4, 5), "!").build(),
        DeltaBuilder(5).delete(Interval(0, 1)).build(),
        DeltaBuilder(5).insert(5, "!!").build(),
        DeltaBuilder(5).insert(5, "?").build(),
    ],
)
def test_other_delta_shapes_are_ignored(delta: Optional[EditDelta]) -> None:
    assert CapitalizationTransform.is_trigger(delta) is False


def test_bang_in_middle_of_line_uses_insertion_point() -> None:
    transform, _ = make_transform()
    view, delta = type_bang("one two three", offset=7)

    transform.on_edit(view, delta)
    apply_submitted(view)

    assert view.text == "one TWO! three"


def test_multiline_and_multibyte_offsets() -> None:
    transform, _ = make_transform()
    view, delta = type_bang("первая строка\nçava déjà")

    transform.on_edit(view, delta)
    apply_submitted(view)

    assert view.text == "первая строка\nçava DÉJÀ!"


def test_word_at_line_start() -> None:
    transform, _ = make_transform()
    view, delta = type_bang("first\nsecond")

    transform.on_edit(view, delta)
    apply_submitted(view)

    assert view.text == "first\nSECOND!"


def test_reapplying_to_capitalized_word_submits_nothing() -> None:
    transform, _ = make_transform()
    view, delta = type_bang("hello world")
    transform.on_edit(view, delta)
    apply_submitted(view)

    trigger = DeltaBuilder(view.get_buf_size() - 1).insert(11, "!").build()
    outcome = transform.on_edit(view, trigger)

    assert outcome.ok
    assert outcome.value is None
    assert view.text == "hello WORLD!"


def test_edit_carries_tag_unchanged() -> None:
    tag = EditTag(priority=7, author="capitalizer", after_cursor=True)
    transform, _ = make_transform(tag=tag)
    view, delta = type_bang("go")

    transform.on_edit(view, delta)

    (submitted,) = view.pending_edits
    assert submitted.priority == 7
    assert submitted.author == "capitalizer"
    assert submitted.after_cursor is True


class BrokenLinesView(MemoryView):
    def __init__(self, text: str, error: Exception) -> None:
        super().__init__(text)
        self.error = error

    def offset_of_line(self, line: int) -> int:
        raise self.error


def test_lookup_failure_aborts_silently() -> None:
    transform, sink = make_transform()
    view = BrokenLinesView("hello", LineOutOfRange(0))
    delta = type_text(view, 5, "!")

    outcome = transform.on_edit(view, delta)

    assert not outcome.ok
    assert view.pending_edits == []
    assert [operation for operation, _, _ in sink.reports] == ["transform.capitalize"]


def test_transport_error_propagates() -> None:
    transform, _ = make_transform()
    view = BrokenLinesView("hello", TransportError("closed"))
    delta = type_text(view, 5, "!")

    with pytest.raises(TransportError):
        transform.on_edit(view, delta)
