"""Selection context, results, events, and the shared selector runner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from textobj_engine.buffer import (
    Buffer,
    BufferCapability,
    CursorCapability,
    CursorTransaction,
    Span,
    ensure_offset,
)
from textobj_engine.runtime import telemetry

from .classifier import DefaultClassifier, TextClassifier


class SelectionError(RuntimeError):
    """Base class for recoverable selector failures."""

    reason: str = "selection_failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.reason)


class NoEnclosingPair(SelectionError):
    reason = "no_enclosing_pair"


class NoStringContext(SelectionError):
    reason = "no_string_context"


class NoWord(SelectionError):
    reason = "no_word"


class NoDefinition(SelectionError):
    reason = "no_definition"


@dataclass(slots=True)
class SelectionResult:
    """Outcome returned from every selector and cursor action."""

    ok: bool
    status: str = "selected"
    span: Optional[Span] = None
    reason: Optional[str] = None


class SelectionBus:
    """Minimal event bus letting hosts observe selection changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class SelectionContext:
    """Everything a selector reads or mutates during one invocation."""

    buffer: BufferCapability
    cursor: CursorCapability
    classifier: TextClassifier = field(default_factory=DefaultClassifier)
    bus: SelectionBus = field(default_factory=SelectionBus)
    name: str = "default"

    @classmethod
    def for_buffer(
        cls,
        buffer: Buffer,
        *,
        classifier: Optional[TextClassifier] = None,
        bus: Optional[SelectionBus] = None,
    ) -> "SelectionContext":
        return cls(
            buffer=buffer.document,
            cursor=buffer.cursor,
            classifier=classifier or DefaultClassifier(),
            bus=bus or SelectionBus(),
            name=buffer.name,
        )

    @property
    def point(self) -> int:
        return self.cursor.get_point()


SpanFunc = Callable[[SelectionContext], Span]


def run_selector(
    context: SelectionContext, label: str, compute: SpanFunc
) -> SelectionResult:
    """Compute a span and, on success, select it with point at its start.

    ``SelectionError`` raised by ``compute`` becomes a failed result; the
    cursor is left exactly as it was.
    """

    point = ensure_offset(context.buffer, context.cursor.get_point())
    mark = context.cursor.get_mark()
    with telemetry.span(
        f"selector::{label}",
        component="selectors",
        metadata={"point": point, "mark": mark},
    ) as handle:
        try:
            span = compute(context)
        except SelectionError as exc:
            handle.add_metadata("status", "failed")
            handle.add_metadata("reason", exc.reason)
            telemetry.record_event(
                "selection.failed", data={"label": label, "reason": exc.reason}
            )
            context.bus.emit("selection.failed", {"label": label, "reason": exc.reason})
            return SelectionResult(ok=False, status="failed", reason=exc.reason)

        with CursorTransaction(context.cursor, label, buffer_name=context.name) as tx:
            tx.select(span)

        status = "empty" if span.empty else "selected"
        handle.add_metadata("status", status)
        handle.add_metadata("span", (span.start, span.end))
        context.bus.emit(
            "selection.changed",
            {
                "label": label,
                "start": span.start,
                "end": span.end,
                "point": context.cursor.get_point(),
                "mark": context.cursor.get_mark(),
            },
        )
        return SelectionResult(ok=True, status=status, span=span)


__all__ = [
    "SelectionError",
    "NoEnclosingPair",
    "NoStringContext",
    "NoWord",
    "NoDefinition",
    "SelectionResult",
    "SelectionBus",
    "SelectionContext",
    "SpanFunc",
    "run_selector",
]
