"""Quoted-string text objects."""

from __future__ import annotations

from textobj_engine.buffer import Span

from .base import NoStringContext, SelectionContext, SelectionResult, run_selector
from .pairs import inner_span

ESCAPE_CHAR = "\\"


def string_span(context: SelectionContext) -> Span:
    """Quoted span containing point, or starting on the quote under point."""

    buffer = context.buffer
    point = context.point
    quotes = context.classifier.quote_chars

    lexical = context.classifier.lexical_context(buffer, point)
    under_point = buffer.char_at(point)
    if lexical is not None and lexical.in_string and lexical.string_start is not None:
        start = lexical.string_start
    elif under_point is not None and under_point in quotes:
        start = point
    else:
        raise NoStringContext()

    quote = buffer.char_at(start)
    if quote is None:
        raise NoStringContext(f"string start {start} outside buffer")

    index = start + 1
    length = buffer.length()
    while index < length:
        char = buffer.char_at(index)
        if char == ESCAPE_CHAR:
            index += 2
            continue
        if char == quote:
            return Span(start, index + 1)
        index += 1
    raise NoStringContext(f"string at offset {start} is unterminated")


def select_outer_string(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "outer_string", string_span)


def select_inner_string(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "inner_string", lambda ctx: inner_span(string_span(ctx)))


__all__ = ["string_span", "select_outer_string", "select_inner_string"]
