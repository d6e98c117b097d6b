"""Top-level definition text object."""

from __future__ import annotations

from textobj_engine.buffer import BufferCapability, Span

from .base import NoDefinition, SelectionContext, SelectionResult, run_selector
from .scan import INDENT_CHARS, is_blank_line, next_line_start, previous_line_start
from .trim import trim_span

CLOSING_CHARS = ")]}"


def _is_header(buffer: BufferCapability, line_start: int) -> bool:
    char = buffer.char_at(line_start)
    return char is not None and not char.isspace() and char not in CLOSING_CHARS


def _is_body(buffer: BufferCapability, line_start: int) -> bool:
    if is_blank_line(buffer, line_start):
        return True
    return buffer.char_at(line_start) in INDENT_CHARS


def definition_span(context: SelectionContext) -> Span:
    """Header line at column 0, its indented body and an optional closer line.

    ``int main() {`` ... ``}`` and ``def main():`` plus its indented body are
    both covered; trailing blank lines are trimmed away.
    """

    buffer = context.buffer
    header = buffer.line_start(context.point)
    while not _is_header(buffer, header):
        previous = previous_line_start(buffer, header)
        if previous is None:
            raise NoDefinition()
        header = previous

    last = header
    while True:
        following = next_line_start(buffer, last)
        if following is None:
            break
        if _is_body(buffer, following):
            last = following
            continue
        if buffer.char_at(following) in CLOSING_CHARS:
            last = following
        break

    return trim_span(buffer, Span(header, buffer.line_end(last)))


def select_function(context: SelectionContext) -> SelectionResult:
    return run_selector(context, "function", definition_span)


__all__ = ["CLOSING_CHARS", "definition_span", "select_function"]
