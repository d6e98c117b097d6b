"""Actions applied to an existing selection."""

from __future__ import annotations

from textobj_engine.buffer import CursorTransaction, Span
from textobj_engine.selectors.base import SelectionContext, SelectionResult, run_selector
from textobj_engine.selectors.trim import trim_span


def _selection_range(context: SelectionContext) -> Span | None:
    cursor = context.cursor
    if not cursor.is_selection_active():
        return None
    return Span.ordered(cursor.get_point(), cursor.get_mark())


def collapse_to_front(context: SelectionContext) -> SelectionResult:
    return _collapse(context, label="collapse_to_front", front=True)


def collapse_to_back(context: SelectionContext) -> SelectionResult:
    return _collapse(context, label="collapse_to_back", front=False)


def _collapse(context: SelectionContext, *, label: str, front: bool) -> SelectionResult:
    selection = _selection_range(context)
    if selection is None:
        return SelectionResult(ok=False, status="no_selection")
    target = selection.start if front else selection.end
    with CursorTransaction(context.cursor, label, buffer_name=context.name) as tx:
        tx.collapse(target)
    context.bus.emit("selection.collapsed", {"label": label, "offset": target})
    return SelectionResult(ok=True, status="collapsed", span=Span(target, target))


def exchange_point_and_mark(context: SelectionContext) -> SelectionResult:
    selection = _selection_range(context)
    if selection is None:
        return SelectionResult(ok=False, status="no_selection")
    cursor = context.cursor
    point, mark = cursor.get_point(), cursor.get_mark()
    with CursorTransaction(context.cursor, "exchange", buffer_name=context.name):
        cursor.set_point(mark)
        cursor.set_mark(point)
    context.bus.emit(
        "selection.exchanged", {"point": cursor.get_point(), "mark": cursor.get_mark()}
    )
    return SelectionResult(ok=True, status="exchanged", span=selection)


def trim_selection(context: SelectionContext) -> SelectionResult:
    """Shrink the active selection past blanks at either edge."""

    selection = _selection_range(context)
    if selection is None:
        return SelectionResult(ok=False, status="no_selection")
    return run_selector(context, "trim", lambda ctx: trim_span(ctx.buffer, selection))


__all__ = [
    "collapse_to_front",
    "collapse_to_back",
    "exchange_point_and_mark",
    "trim_selection",
]
