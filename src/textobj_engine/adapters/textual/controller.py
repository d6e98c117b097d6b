"""Textual adapter that runs named selectors against a ``TextArea``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from textual.widgets.text_area import Selection

from textobj_engine.buffer import TextDocument
from textobj_engine.registry import SelectorRegistry, load_default_selectors
from textobj_engine.selectors import (
    DefaultClassifier,
    SelectionBus,
    SelectionContext,
    SelectionResult,
    TextClassifier,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextAreaHost:
    """Buffer and cursor capabilities backed by a Textual ``TextArea``.

    Point maps to ``selection.end`` (the visible cursor) and mark to
    ``selection.start`` (the anchor). Text is snapshotted on ``refresh`` so a
    selector always scans one consistent version of the document.
    """

    def __init__(self, text_area: Any) -> None:
        self.text_area = text_area
        self._document = TextDocument.from_text(text_area.text)
        self._active = False

    def refresh(self) -> None:
        self._document = TextDocument.from_text(self.text_area.text)

    @property
    def document(self) -> TextDocument:
        return self._document

    def length(self) -> int:
        return self._document.length()

    def char_at(self, offset: int) -> Optional[str]:
        return self._document.char_at(offset)

    def substring(self, start: int, end: int) -> str:
        return self._document.substring(start, end)

    def line_start(self, offset: int) -> int:
        return self._document.line_start(offset)

    def line_end(self, offset: int) -> int:
        return self._document.line_end(offset)

    def get_point(self) -> int:
        return self._document.offset(*self.text_area.selection.end)

    def get_mark(self) -> int:
        return self._document.offset(*self.text_area.selection.start)

    def set_point(self, offset: int) -> None:
        current = self.text_area.selection
        self.text_area.selection = Selection(
            start=current.start, end=self._document.location(offset)
        )

    def set_mark(self, offset: int) -> None:
        current = self.text_area.selection
        self.text_area.selection = Selection(
            start=self._document.location(offset), end=current.end
        )

    def is_selection_active(self) -> bool:
        return self._active or not self.text_area.selection.is_empty

    def activate_selection(self) -> None:
        self._active = True

    def deactivate_selection(self) -> None:
        self._active = False
        self.text_area.selection = Selection.cursor(self.text_area.selection.end)


def create_default_registry() -> SelectorRegistry:
    registry = SelectorRegistry(logger_name="textobj_engine.registry")
    load_default_selectors(registry)
    return registry


class TextualSelectionAdapter:
    """Bridges registry dispatch + bus events to a Textual-friendly surface."""

    def __init__(
        self,
        text_area: Any,
        hooks: TextualUIHooks,
        *,
        registry: SelectorRegistry | None = None,
        classifier: TextClassifier | None = None,
    ) -> None:
        self.host = TextAreaHost(text_area)
        self.hooks = hooks
        self.registry = registry or create_default_registry()
        self.classifier = classifier or DefaultClassifier()
        self.bus = SelectionBus()
        self._subscribe_events()

    def run(self, selector_id: str) -> SelectionResult:
        """Refresh the text snapshot and dispatch ``selector_id``."""

        self.host.refresh()
        context = SelectionContext(
            buffer=self.host,
            cursor=self.host,
            classifier=self.classifier,
            bus=self.bus,
            name="textual",
        )
        self._log_state("run ->", selector=selector_id)
        result = self.registry.dispatch(selector_id, context)
        self.hooks.update_status(result.reason or result.status)
        self._log_state("result <-", status=result.status, reason=result.reason)
        return result

    def _subscribe_events(self) -> None:
        for event in (
            "selection.changed",
            "selection.failed",
            "selection.collapsed",
            "selection.exchanged",
        ):
            self.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        selection = self.host.text_area.selection
        return {
            "cursor": selection.end,
            "anchor": selection.start,
            "active": self.host.is_selection_active(),
            "length": self.host.length(),
        }


__all__ = [
    "TextAreaHost",
    "TextualSelectionAdapter",
    "TextualUIHooks",
    "create_default_registry",
]
