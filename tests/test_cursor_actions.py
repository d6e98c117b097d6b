from typing import Optional

from textobj_engine.actions import (
    collapse_to_back,
    collapse_to_front,
    exchange_point_and_mark,
    trim_selection,
)
from textobj_engine.buffer import Buffer, Span, TextDocument
from textobj_engine.runtime.config import EngineSettings
from textobj_engine.selectors import DefaultClassifier, SelectionContext, trim_span


def make_context(
    text: str, point: int, mark: Optional[int] = None
) -> tuple[Buffer, SelectionContext]:
    buffer = Buffer.from_text(text, point=point, mark=mark)
    context = SelectionContext.for_buffer(
        buffer, classifier=DefaultClassifier(EngineSettings())
    )
    return buffer, context


def test_collapse_to_front() -> None:
    buffer, context = make_context("0123456789abc", 3, 9)

    result = collapse_to_front(context)

    assert result.status == "collapsed"
    assert (buffer.cursor.point, buffer.cursor.mark) == (3, 3)
    assert buffer.cursor.active is False


def test_collapse_to_back() -> None:
    buffer, context = make_context("0123456789abc", 3, 9)

    collapse_to_back(context)

    assert buffer.cursor.point == 9
    assert buffer.cursor.active is False


def test_collapse_uses_ordered_region() -> None:
    buffer, context = make_context("0123456789abc", 9, 3)

    collapse_to_front(context)

    assert buffer.cursor.point == 3


def test_collapse_without_selection_is_reported() -> None:
    buffer, context = make_context("abc", 1)

    result = collapse_to_back(context)

    assert result.ok is False
    assert result.status == "no_selection"
    assert buffer.cursor.point == 1


def test_collapse_publishes_event() -> None:
    buffer, context = make_context("0123456789abc", 3, 9)
    events: list[object] = []
    context.bus.subscribe("selection.collapsed", events.append)

    collapse_to_back(context)

    assert events == [{"label": "collapse_to_back", "offset": 9}]


def test_exchange_point_and_mark() -> None:
    buffer, context = make_context("hello world", 6, 11)

    result = exchange_point_and_mark(context)

    assert result.status == "exchanged"
    assert (buffer.cursor.point, buffer.cursor.mark) == (11, 6)
    assert buffer.selected_text() == "world"


def test_trim_selection() -> None:
    buffer, context = make_context("  hi \n", 0, 6)

    result = trim_selection(context)

    assert result.span == Span(2, 4)
    assert buffer.selected_text() == "hi"


def test_trim_selection_requires_selection() -> None:
    _, context = make_context("  hi ", 0)

    assert trim_selection(context).status == "no_selection"


def test_trim_span_is_idempotent() -> None:
    document = TextDocument.from_text("\t x y \n")

    once = trim_span(document, Span(0, 7))

    assert once == Span(2, 5)
    assert trim_span(document, once) == once


def test_trim_span_collapses_blank_range() -> None:
    document = TextDocument.from_text("   ")

    assert trim_span(document, Span(0, 3)) == Span(3, 3)


def test_trim_selection_of_blank_range_deactivates() -> None:
    buffer, context = make_context("a   b", 1, 4)

    result = trim_selection(context)

    assert result.status == "empty"
    assert (buffer.cursor.point, buffer.cursor.mark) == (4, 4)
    assert buffer.cursor.active is False
    assert collapse_to_front(context).status == "no_selection"
