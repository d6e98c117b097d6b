import pytest

from textobj_engine.actions import collapse_to_back
from textobj_engine.buffer import Buffer, Span, TextDocument
from textobj_engine.runtime.config import EngineSettings
from textobj_engine.selectors import (
    DefaultClassifier,
    NoEnclosingPair,
    SelectionContext,
    find_enclosing_pair,
    inner_span,
    select_inner_angle,
    select_inner_bracket,
    select_inner_paren,
    select_outer_angle,
    select_outer_brace,
    select_outer_paren,
)


def make_context(text: str, point: int) -> tuple[Buffer, SelectionContext]:
    buffer = Buffer.from_text(text, point=point)
    context = SelectionContext.for_buffer(
        buffer, classifier=DefaultClassifier(EngineSettings())
    )
    return buffer, context


def test_outer_paren_from_between_nested_pairs() -> None:
    buffer, context = make_context("a(b(c)d)e", 6)

    result = select_outer_paren(context)

    assert result.span == Span(1, 8)
    assert buffer.selected_text() == "(b(c)d)"
    assert buffer.cursor.point == 1


def test_outer_paren_picks_innermost_pair() -> None:
    buffer, context = make_context("a(b(c)d)e", 4)

    select_outer_paren(context)

    assert buffer.selected_text() == "(c)"


def test_outer_paren_on_opening_delimiter() -> None:
    buffer, context = make_context("a(b(c)d)e", 1)

    select_outer_paren(context)

    assert buffer.selected_text() == "(b(c)d)"


def test_outer_paren_on_closing_delimiter() -> None:
    buffer, context = make_context("a(b(c)d)e", 7)

    select_outer_paren(context)

    assert buffer.selected_text() == "(b(c)d)"


def test_inner_paren_strips_delimiters() -> None:
    buffer, context = make_context("a(b(c)d)e", 6)

    result = select_inner_paren(context)

    assert result.span == Span(2, 7)
    assert buffer.selected_text() == "b(c)d"


def test_inner_paren_with_empty_interior() -> None:
    buffer, context = make_context("f()", 2)

    result = select_inner_paren(context)

    assert result.ok is True
    assert result.status == "empty"
    assert result.span == Span(2, 2)
    assert (buffer.cursor.point, buffer.cursor.mark) == (2, 2)
    assert buffer.cursor.active is False


def test_unmatched_closer_fails_without_moving_cursor() -> None:
    buffer, context = make_context("abc)", 3)

    result = select_outer_paren(context)

    assert result.ok is False
    assert result.reason == "no_enclosing_pair"
    assert buffer.cursor.point == 3
    assert buffer.cursor.active is False


def test_unclosed_opener_fails() -> None:
    _, context = make_context("(abc", 2)

    result = select_outer_paren(context)

    assert result.ok is False
    assert result.reason == "no_enclosing_pair"


def test_pairs_span_multiple_lines() -> None:
    buffer, context = make_context("call(\n  arg\n)", 8)

    select_outer_paren(context)

    assert buffer.selected_text() == "(\n  arg\n)"


def test_inner_bracket_skips_nested_sibling() -> None:
    buffer, context = make_context("x = [1, [2, 3], 4]", 16)

    select_inner_bracket(context)

    assert buffer.selected_text() == "1, [2, 3], 4"


def test_outer_brace() -> None:
    buffer, context = make_context("{ a: { b } }", 2)

    select_outer_brace(context)

    assert buffer.selected_text() == "{ a: { b } }"


def test_angle_pairs() -> None:
    buffer, context = make_context("Vec<Option<T>>", 11)

    select_inner_angle(context)
    assert buffer.selected_text() == "T"

    buffer.cursor.point = 11
    select_outer_angle(context)
    assert buffer.selected_text() == "<T>"


def test_find_enclosing_pair_direct() -> None:
    document = TextDocument.from_text("[a]")

    assert find_enclosing_pair(document, 1, "[", "]") == Span(0, 3)
    with pytest.raises(NoEnclosingPair):
        find_enclosing_pair(document, 1, "(", ")")
    with pytest.raises(ValueError):
        find_enclosing_pair(document, 1, "((", "))")


def test_inner_span_derivation() -> None:
    assert inner_span(Span(1, 8)) == Span(2, 7)
    assert inner_span(Span(4, 6)) == Span(5, 5)


def test_collapse_after_empty_interior_reports_no_selection() -> None:
    buffer, context = make_context("f()", 2)
    select_inner_paren(context)

    result = collapse_to_back(context)

    assert result.status == "no_selection"
    assert buffer.cursor.point == 2
