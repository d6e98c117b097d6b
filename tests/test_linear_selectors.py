from __future__ import annotations

from typing import Optional

from textobj_engine.buffer import Buffer, Span
from textobj_engine.runtime.config import EngineSettings
from textobj_engine.selectors import (
    DefaultClassifier,
    SelectionContext,
    select_buffer,
    select_inc_newline,
    select_line,
    select_paragraph,
    select_sentence,
    select_within_whitespace,
    select_word,
)


def make_context(
    text: str, point: int, *, mark: Optional[int] = None
) -> tuple[Buffer, SelectionContext]:
    buffer = Buffer.from_text(text, point=point, mark=mark)
    classifier = DefaultClassifier(EngineSettings())
    return buffer, SelectionContext.for_buffer(buffer, classifier=classifier)


def test_select_word_inside_word() -> None:
    buffer, context = make_context("hello brave world", 8)

    result = select_word(context)

    assert result.ok is True
    assert buffer.selected_text() == "brave"
    assert (buffer.cursor.point, buffer.cursor.mark) == (6, 11)


def test_select_word_from_whitespace_takes_next_word() -> None:
    buffer, context = make_context("foo   bar", 4)

    select_word(context)

    assert buffer.selected_text() == "bar"


def test_select_word_at_buffer_end_takes_previous_word() -> None:
    buffer, context = make_context("foo bar  ", 9)

    result = select_word(context)

    assert result.span == Span(4, 7)
    assert buffer.selected_text() == "bar"


def test_select_word_keeps_underscores() -> None:
    buffer, context = make_context("snake_case x", 0)

    select_word(context)

    assert buffer.selected_text() == "snake_case"


def test_select_word_without_words_fails_and_keeps_cursor() -> None:
    buffer, context = make_context("   ", 1)

    result = select_word(context)

    assert result.ok is False
    assert result.reason == "no_word"
    assert (buffer.cursor.point, buffer.cursor.mark, buffer.cursor.active) == (
        1,
        1,
        False,
    )


def test_select_within_whitespace() -> None:
    buffer, context = make_context("alpha beta.gamma delta", 8)

    select_within_whitespace(context)

    assert buffer.selected_text() == "beta.gamma"


def test_select_within_whitespace_clamps_at_buffer_start() -> None:
    buffer, context = make_context("alpha beta", 0)

    result = select_within_whitespace(context)

    assert result.ok is True
    assert buffer.cursor.point == 0
    assert buffer.selected_text() == "alpha"


def test_select_within_whitespace_stops_at_newlines() -> None:
    buffer, context = make_context("one\ntwo-three\nfour", 6)

    select_within_whitespace(context)

    assert buffer.selected_text() == "two-three"


def test_select_line_starts_at_indentation() -> None:
    buffer, context = make_context("  indented line\nnext", 5)

    select_line(context)

    assert (buffer.cursor.point, buffer.cursor.mark) == (2, 15)
    assert buffer.selected_text() == "indented line"


def test_select_inc_newline_includes_newline() -> None:
    buffer, context = make_context("first\nsecond\nthird", 8)

    select_inc_newline(context)

    assert buffer.selected_text() == "second\n"


def test_select_inc_newline_on_last_line_clamps() -> None:
    buffer, context = make_context("first\nsecond\nthird", 15)

    result = select_inc_newline(context)

    assert result.span == Span(13, 18)


def test_select_sentence_trims_separator() -> None:
    buffer, context = make_context("Hello world. This is fine! Bye now", 18)

    select_sentence(context)

    assert buffer.selected_text() == "This is fine!"


def test_select_sentence_without_terminator_runs_to_paragraph_end() -> None:
    buffer, context = make_context("Hello world. This is fine! Bye now", 30)

    select_sentence(context)

    assert buffer.selected_text() == "Bye now"


def test_select_sentence_stays_within_paragraph() -> None:
    buffer, context = make_context("First para\n\nSecond one. Next.", 2)

    select_sentence(context)

    assert buffer.selected_text() == "First para"


def test_select_paragraph() -> None:
    text = "alpha\nbeta\n\ngamma\ndelta\n"
    buffer, context = make_context(text, 13)

    select_paragraph(context)

    assert buffer.selected_text() == "gamma\ndelta"


def test_select_paragraph_from_blank_line_uses_following() -> None:
    text = "alpha\nbeta\n\ngamma\ndelta\n"
    buffer, context = make_context(text, 11)

    select_paragraph(context)

    assert buffer.selected_text() == "gamma\ndelta"


def test_select_paragraph_from_trailing_blank_uses_preceding() -> None:
    buffer, context = make_context("alpha\n\n", 7)

    select_paragraph(context)

    assert buffer.selected_text() == "alpha"


def test_select_buffer() -> None:
    buffer, context = make_context("abc\ndef", 2)

    result = select_buffer(context)

    assert result.span == Span(0, 7)
    assert buffer.cursor.point == 0
    assert buffer.cursor.mark == 7


def test_selection_changed_event_published() -> None:
    buffer, context = make_context("abc def", 5)
    events: list[object] = []
    context.bus.subscribe("selection.changed", lambda payload: events.append(payload))

    select_word(context)

    assert events == [{"label": "word", "start": 4, "end": 7, "point": 4, "mark": 7}]
