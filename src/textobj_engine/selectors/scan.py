"""Bounded character and line scanning primitives.

Every helper stops at the buffer edges, so callers never dereference an
offset outside ``[0, length)``.
"""

from __future__ import annotations

from typing import Callable, Optional

from textobj_engine.buffer import BufferCapability

CharPredicate = Callable[[str], bool]

INDENT_CHARS = " \t"
BLANK_CHARS = " \t\r\f\v"


def skip_forward(buffer: BufferCapability, offset: int, predicate: CharPredicate) -> int:
    """Advance from ``offset`` while the character there satisfies ``predicate``."""

    length = buffer.length()
    while offset < length:
        char = buffer.char_at(offset)
        if char is None or not predicate(char):
            break
        offset += 1
    return offset


def skip_backward(
    buffer: BufferCapability, offset: int, predicate: CharPredicate
) -> int:
    """Retreat from ``offset`` while the character before it satisfies ``predicate``."""

    while offset > 0:
        char = buffer.char_at(offset - 1)
        if char is None or not predicate(char):
            break
        offset -= 1
    return offset


def next_line_start(buffer: BufferCapability, line_start: int) -> Optional[int]:
    end = buffer.line_end(line_start)
    if end >= buffer.length():
        return None
    return end + 1


def previous_line_start(buffer: BufferCapability, line_start: int) -> Optional[int]:
    if line_start <= 0:
        return None
    return buffer.line_start(line_start - 1)


def line_text(buffer: BufferCapability, line_start: int) -> str:
    return buffer.substring(line_start, buffer.line_end(line_start))


def is_blank_line(buffer: BufferCapability, line_start: int) -> bool:
    """True when the line holds nothing but ``BLANK_CHARS`` (CR included)."""

    return all(char in BLANK_CHARS for char in line_text(buffer, line_start))


def indentation_end(buffer: BufferCapability, line_start: int) -> int:
    """Offset of the first non-indent column on the line (back-to-indentation)."""

    return skip_forward(buffer, line_start, lambda char: char in INDENT_CHARS)


__all__ = [
    "CharPredicate",
    "INDENT_CHARS",
    "BLANK_CHARS",
    "skip_forward",
    "skip_backward",
    "next_line_start",
    "previous_line_start",
    "line_text",
    "is_blank_line",
    "indentation_end",
]
