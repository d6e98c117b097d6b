"""Indentation-block text object."""

from __future__ import annotations

from textobj_engine.buffer import BufferCapability, Span

from .base import SelectionContext, SelectionResult, run_selector
from .scan import (
    indentation_end,
    is_blank_line,
    next_line_start,
    previous_line_start,
)


def indentation_prefix(buffer: BufferCapability, line_start: int) -> str:
    """Leading whitespace of the line; blank lines have no prefix."""

    if is_blank_line(buffer, line_start):
        return ""
    return buffer.substring(line_start, indentation_end(buffer, line_start))


def starts_with_prefix(buffer: BufferCapability, line_start: int, prefix: str) -> bool:
    end = min(line_start + len(prefix), buffer.length())
    return buffer.substring(line_start, end) == prefix


def indent_span(context: SelectionContext) -> Span:
    """Contiguous lines around point that begin with the exact same indentation.

    Matching is literal: a line continues the block only if it starts with the
    identical whitespace string, so mixed tabs/spaces of equal width do not
    match. Top-level lines select the whole buffer.
    """

    buffer = context.buffer
    line = buffer.line_start(context.point)
    prefix = indentation_prefix(buffer, line)
    if not prefix:
        return Span(0, buffer.length())

    first = line
    while True:
        previous = previous_line_start(buffer, first)
        if previous is None or not starts_with_prefix(buffer, previous, prefix):
            break
        first = previous

    last = line
    while True:
        following = next_line_start(buffer, last)
        if following is None or not starts_with_prefix(buffer, following, prefix):
            break
        last = following

    return Span(first, buffer.line_end(last))


def select_indent(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "indent", indent_span)


__all__ = ["indentation_prefix", "starts_with_prefix", "indent_span", "select_indent"]
