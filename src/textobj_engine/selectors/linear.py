"""Selectors that scan straight out from point: words, lines, sentences."""

from __future__ import annotations

from textobj_engine.buffer import Span

from .base import NoWord, SelectionContext, SelectionResult, run_selector
from .scan import indentation_end, skip_backward, skip_forward
from .trim import trim_span


def word_span(context: SelectionContext) -> Span:
    """The word at point, or the first one after it.

    Scans forward to the end of the next word, then back to its start. When
    no word follows point, the nearest word before point is used instead.
    """

    buffer = context.buffer
    is_word = context.classifier.is_word_char
    point = context.point

    word_begin = skip_forward(buffer, point, lambda char: not is_word(char))
    if word_begin < buffer.length():
        end = skip_forward(buffer, word_begin, is_word)
        return Span(skip_backward(buffer, end, is_word), end)

    end = skip_backward(buffer, point, lambda char: not is_word(char))
    if end == 0:
        raise NoWord()
    return Span(skip_backward(buffer, end, is_word), end)


def within_whitespace_span(context: SelectionContext) -> Span:
    is_space = context.classifier.is_whitespace
    start = skip_backward(context.buffer, context.point, lambda char: not is_space(char))
    end = skip_forward(context.buffer, context.point, lambda char: not is_space(char))
    return Span(start, end)


def line_span(context: SelectionContext) -> Span:
    buffer = context.buffer
    end = buffer.line_end(context.point)
    start = min(indentation_end(buffer, buffer.line_start(context.point)), end)
    return Span(start, end)


def inc_newline_span(context: SelectionContext) -> Span:
    buffer = context.buffer
    end = buffer.line_end(context.point)
    if end < buffer.length():
        end += 1
    return Span(buffer.line_start(context.point), end)


def sentence_span(context: SelectionContext) -> Span:
    bounds = context.classifier.sentence_bounds(context.buffer, context.point)
    return trim_span(context.buffer, bounds)


def paragraph_span(context: SelectionContext) -> Span:
    bounds = context.classifier.paragraph_bounds(context.buffer, context.point)
    return trim_span(context.buffer, bounds)


def buffer_span(context: SelectionContext) -> Span:
    return Span(0, context.buffer.length())


def select_word(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "word", word_span)


def select_within_whitespace(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "within_whitespace", within_whitespace_span)


def select_line(context: SelectionContext) -> SelectionResult:
    """Select the current line from its indentation to its end, newline excluded."""

    return run_selector(context, "line", line_span)


def select_inc_newline(context: SelectionContext) -> SelectionResult:
    """Select the whole current line including its trailing newline."""

    return run_selector(context, "inc_newline", inc_newline_span)


def select_sentence(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "sentence", sentence_span)


def select_paragraph(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "paragraph", paragraph_span)


def select_buffer(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "buffer", buffer_span)


__all__ = [
    "word_span",
    "within_whitespace_span",
    "line_span",
    "inc_newline_span",
    "sentence_span",
    "paragraph_span",
    "buffer_span",
    "select_word",
    "select_within_whitespace",
    "select_line",
    "select_inc_newline",
    "select_sentence",
    "select_paragraph",
    "select_buffer",
]
