"""Character classes and boundary detection used by the selectors.

Hosts with a real tokenizer can supply their own ``TextClassifier``; the
``DefaultClassifier`` approximates word, sentence, paragraph and string
boundaries from plain character scans.
"""

from __future__ import annotations

from typing import Iterator, Optional, Protocol

from textobj_engine.buffer import BufferCapability, LexicalContext, Span
from textobj_engine.runtime.config import EngineSettings

from .scan import is_blank_line, next_line_start, previous_line_start


class TextClassifier(Protocol):
    """Boundary predicates injected into every selection context."""

    @property
    def quote_chars(self) -> str:
        ...

    def is_word_char(self, char: str) -> bool:
        ...

    def is_whitespace(self, char: str) -> bool:
        ...

    def sentence_bounds(self, buffer: BufferCapability, offset: int) -> Span:
        ...

    def paragraph_bounds(self, buffer: BufferCapability, offset: int) -> Span:
        ...

    def lexical_context(
        self, buffer: BufferCapability, offset: int
    ) -> Optional[LexicalContext]:
        ...


class DefaultClassifier:
    """Pure character-class implementation of ``TextClassifier``."""

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        self.settings = settings or EngineSettings.from_env()

    @property
    def quote_chars(self) -> str:
        return self.settings.quote_chars

    def is_word_char(self, char: str) -> bool:
        return char.isalnum() or char in self.settings.word_chars

    def is_whitespace(self, char: str) -> bool:
        return char.isspace()

    def paragraph_bounds(self, buffer: BufferCapability, offset: int) -> Span:
        """Span of the run of non-blank lines around ``offset``.

        On a blank line the following paragraph is used, falling back to the
        preceding one at the end of the buffer.
        """

        line = buffer.line_start(offset)
        if is_blank_line(buffer, line):
            probe: Optional[int] = line
            while probe is not None and is_blank_line(buffer, probe):
                probe = next_line_start(buffer, probe)
            if probe is None:
                probe = line
                while probe is not None and is_blank_line(buffer, probe):
                    probe = previous_line_start(buffer, probe)
            if probe is None:
                return Span(0, buffer.length())
            line = probe

        first = line
        while True:
            previous = previous_line_start(buffer, first)
            if previous is None or is_blank_line(buffer, previous):
                break
            first = previous

        last = line
        while True:
            following = next_line_start(buffer, last)
            if following is None or is_blank_line(buffer, following):
                break
            last = following

        return Span(first, buffer.line_end(last))

    def sentence_bounds(self, buffer: BufferCapability, offset: int) -> Span:
        """Sentence containing ``offset``, never crossing its paragraph.

        The returned span keeps the whitespace that separates it from the
        previous sentence; selectors trim it.
        """

        paragraph = self.paragraph_bounds(buffer, offset)
        text = buffer.substring(paragraph.start, paragraph.end)
        relative = max(0, min(offset - paragraph.start, len(text)))

        start = 0
        for end in self._sentence_ends(text):
            if relative <= end:
                return Span(paragraph.start + start, paragraph.start + end)
            start = end
        return Span(paragraph.start + start, paragraph.end)

    def _sentence_ends(self, text: str) -> Iterator[int]:
        terminators = self.settings.sentence_terminators
        closers = self.settings.sentence_closers
        index = 0
        length = len(text)
        while index < length:
            if text[index] not in terminators:
                index += 1
                continue
            end = index + 1
            while end < length and text[end] in terminators:
                end += 1
            while end < length and text[end] in closers:
                end += 1
            if end == length or text[end].isspace():
                yield end
            index = end

    def lexical_context(
        self, buffer: BufferCapability, offset: int
    ) -> Optional[LexicalContext]:
        lookup = getattr(buffer, "lexical_context_at", None)
        if callable(lookup):
            context = lookup(offset)
            if context is not None:
                return context
        if not self.settings.scan_strings:
            return None
        return scan_line_strings(buffer, offset, self.settings.quote_chars)


def scan_line_strings(
    buffer: BufferCapability, offset: int, quote_chars: str
) -> LexicalContext:
    """Walk the line up to ``offset`` and report whether a string is open there."""

    index = buffer.line_start(offset)
    open_quote: Optional[str] = None
    opened_at: Optional[int] = None
    while index < offset:
        char = buffer.char_at(index)
        if char is None:
            break
        if open_quote is not None:
            if char == "\\":
                index += 2
                continue
            if char == open_quote:
                open_quote = None
                opened_at = None
        elif char in quote_chars:
            open_quote = char
            opened_at = index
        index += 1

    if open_quote is None:
        return LexicalContext(in_string=False)
    return LexicalContext(in_string=True, string_start=opened_at)


__all__ = ["TextClassifier", "DefaultClassifier", "scan_line_strings"]
