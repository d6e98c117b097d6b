"""High-level buffer facade pairing a document with its live cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from textobj_engine.runtime import telemetry

from .document import LexicalLookup, TextDocument
from .state import Cursor, Span
from .sync import CursorCapability
from .validation import ensure_offset


@dataclass(slots=True)
class BufferView:
    text: str
    point: int
    mark: int
    active: bool
    selection: Optional[Span]


class Buffer:
    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[TextDocument] = None,
        cursor: Optional[Cursor] = None,
    ) -> None:
        self.name = name
        self.document = document or TextDocument()
        self.cursor = cursor or Cursor()
        ensure_offset(self.document, self.cursor.point)
        ensure_offset(self.document, self.cursor.mark)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        point: int = 0,
        mark: Optional[int] = None,
        name: str = "default",
        lexer: Optional[LexicalLookup] = None,
    ) -> "Buffer":
        cursor = Cursor(
            point=point,
            mark=point if mark is None else mark,
            active=mark is not None and mark != point,
        )
        return cls(
            name=name,
            document=TextDocument.from_text(text, lexer=lexer),
            cursor=cursor,
        )

    def snapshot(self) -> BufferView:
        selection = self.cursor.region if self.cursor.active else None
        return BufferView(
            text=self.document.text,
            point=self.cursor.point,
            mark=self.cursor.mark,
            active=self.cursor.active,
            selection=selection,
        )

    def selected_text(self) -> str:
        if not self.cursor.active:
            return ""
        region = self.cursor.region
        return self.document.substring(region.start, region.end)


class CursorTransaction(AbstractContextManager["CursorTransaction"]):
    """Apply cursor changes atomically: any exception restores the prior state."""

    def __init__(
        self, cursor: CursorCapability, label: str, *, buffer_name: str = "default"
    ) -> None:
        self.cursor = cursor
        self.label = label
        self.buffer_name = buffer_name
        self._span_cm: Optional[ContextManager[object]] = None
        self._saved: tuple[int, int, bool] | None = None

    def __enter__(self) -> "CursorTransaction":
        self._saved = (
            self.cursor.get_point(),
            self.cursor.get_mark(),
            self.cursor.is_selection_active(),
        )
        self._span_cm = telemetry.span(
            name=f"cursor::{self.label}",
            component="cursor",
            metadata={"cursor_buffer": self.buffer_name},
        )
        self._span_cm.__enter__()
        return self

    def select(self, span: Span, *, point_at_start: bool = True) -> None:
        """Place point and mark on ``span``; only a non-empty span is active."""

        if point_at_start:
            self.cursor.set_point(span.start)
            self.cursor.set_mark(span.end)
        else:
            self.cursor.set_point(span.end)
            self.cursor.set_mark(span.start)
        if span.empty:
            self.cursor.deactivate_selection()
        else:
            self.cursor.activate_selection()

    def collapse(self, offset: int) -> None:
        self.cursor.set_point(offset)
        self.cursor.set_mark(offset)
        self.cursor.deactivate_selection()

    def rollback(self) -> None:
        if self._saved is None:
            return
        point, mark, active = self._saved
        self.cursor.set_point(point)
        self.cursor.set_mark(mark)
        if active:
            self.cursor.activate_selection()
        else:
            self.cursor.deactivate_selection()

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None:
            self.rollback()
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
