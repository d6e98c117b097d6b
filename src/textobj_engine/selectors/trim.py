"""Shrink a span inward past surrounding blanks."""

from __future__ import annotations

from textobj_engine.buffer import BufferCapability, Span

TRIM_CHARS = " \t\n"


def _is_trimmed(char: str | None) -> bool:
    return char is not None and char in TRIM_CHARS


def trim_span(buffer: BufferCapability, span: Span) -> Span:
    """Drop leading/trailing tabs, newlines and spaces from ``span``.

    An all-blank span collapses to the empty span at its end.
    """

    start, end = span.start, span.end
    while start < end and _is_trimmed(buffer.char_at(start)):
        start += 1
    while end > start and _is_trimmed(buffer.char_at(end - 1)):
        end -= 1
    return Span(start, end)


__all__ = ["TRIM_CHARS", "trim_span"]
