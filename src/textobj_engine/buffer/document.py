"""Core document data structure backing standalone selection buffers."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Callable, Optional

from .sync import BufferValidationError, LexicalContext

LexicalLookup = Callable[[str, int], Optional[LexicalContext]]


@dataclass(frozen=True, slots=True)
class TextDocument:
    """Immutable text with offset and line lookups.

    Offsets address characters in ``[0, length)``; ``length`` itself is a
    valid cursor position but not a character. Line starts are computed once
    so ``line_start``/``line_end`` stay cheap on large buffers.
    """

    text: str = ""
    lexer: Optional[LexicalLookup] = None
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        index = self.text.find("\n")
        while index != -1:
            starts.append(index + 1)
            index = self.text.find("\n", index + 1)
        object.__setattr__(self, "_line_starts", tuple(starts))

    @classmethod
    def from_text(
        cls, text: str, *, lexer: Optional[LexicalLookup] = None
    ) -> "TextDocument":
        return cls(text=text, lexer=lexer)

    def length(self) -> int:
        return len(self.text)

    def char_at(self, offset: int) -> Optional[str]:
        if 0 <= offset < len(self.text):
            return self.text[offset]
        return None

    def substring(self, start: int, end: int) -> str:
        if start > end:
            start, end = end, start
        if start < 0 or end > len(self.text):
            raise BufferValidationError(
                f"Range [{start}, {end}) outside buffer", offset=start
            )
        return self.text[start:end]

    def line_index(self, offset: int) -> int:
        """Return the zero-based line number containing ``offset``."""

        return bisect_right(self._line_starts, offset) - 1

    def line_start(self, offset: int) -> int:
        return self._line_starts[self.line_index(offset)]

    def line_end(self, offset: int) -> int:
        row = self.line_index(offset)
        if row + 1 < len(self._line_starts):
            return self._line_starts[row + 1] - 1
        return len(self.text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def lexical_context_at(self, offset: int) -> Optional[LexicalContext]:
        """Ask the attached lexer, if any, whether ``offset`` is inside a string."""

        if self.lexer is None:
            return None
        return self.lexer(self.text, offset)

    def location(self, offset: int) -> tuple[int, int]:
        """Translate an offset into a ``(row, column)`` location."""

        row = self.line_index(offset)
        return (row, offset - self._line_starts[row])

    def offset(self, row: int, column: int) -> int:
        """Translate a ``(row, column)`` location into an offset."""

        if row < 0 or row >= len(self._line_starts):
            raise BufferValidationError("Row out of range", offset=None)
        start = self._line_starts[row]
        end = self.line_end(start)
        if column < 0 or column > end - start:
            raise BufferValidationError("Column out of range", offset=start)
        return start + column
