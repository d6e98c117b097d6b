"""Registry responsible for storing and dispatching named operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from textobj_engine.runtime.telemetry import span
from textobj_engine.selectors.base import SelectionContext, SelectionResult

from .models import SelectorRef


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    selector_count: int
    namespaces: tuple[str, ...]


class SelectorConflictError(RuntimeError):
    """Raised when a new selector id collides with an existing entry."""

    def __init__(self, selector: SelectorRef, existing: SelectorRef):
        super().__init__(
            f"Selector '{selector.id}' already registered by {existing.handler!r}"
        )
        self.selector = selector
        self.existing = existing


class SelectorRegistry:
    """Owns selector references keyed by id."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._selectors: Dict[str, SelectorRef] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def __contains__(self, selector_id: object) -> bool:
        return selector_id in self._selectors

    def get(self, selector_id: str) -> SelectorRef:
        try:
            return self._selectors[selector_id]
        except KeyError as exc:
            raise KeyError(f"Selector '{selector_id}' is not registered") from exc

    def register(self, selector: SelectorRef, *, replace: bool = False) -> SelectorRef:
        with span(
            "registry::register",
            logger_name=self._logger_name,
            component="registry",
            metadata={"selector_id": selector.id},
        ) as handle:
            existing = self._selectors.get(selector.id)
            if existing is not None and not replace:
                handle.add_metadata("conflict", selector.id)
                raise SelectorConflictError(selector, existing)
            self._selectors[selector.id] = selector
            self._touch()
            return selector

    def unregister(self, selector_id: str) -> Optional[SelectorRef]:
        with span(
            "registry::unregister",
            logger_name=self._logger_name,
            component="registry",
            metadata={"selector_id": selector_id},
        ):
            selector = self._selectors.pop(selector_id, None)
            if selector is not None:
                self._touch()
            return selector

    def iter_selectors(
        self, namespace: Optional[str] = None, *, tag: Optional[str] = None
    ) -> Iterator[SelectorRef]:
        for selector in self._selectors.values():
            if namespace is not None and selector.namespace != namespace:
                continue
            if tag is not None and not selector.has_tag(tag):
                continue
            yield selector

    def stats(self) -> RegistryStats:
        return RegistryStats(
            selector_count=len(self._selectors),
            namespaces=tuple(sorted({ref.namespace for ref in self._selectors.values()})),
        )

    def dispatch(self, selector_id: str, context: SelectionContext) -> SelectionResult:
        selector = self.get(selector_id)
        with span(
            f"registry::dispatch::{selector.telemetry_name}",
            logger_name=self._logger_name,
            component="registry",
            metadata={"selector_id": selector.id, "buffer": context.name},
        ) as handle:
            outcome = selector(context)
            if not isinstance(outcome, SelectionResult):
                raise TypeError(
                    f"Selector '{selector.id}' returned {type(outcome).__name__}, "
                    "expected SelectionResult"
                )
            handle.add_metadata("status", outcome.status)
            return outcome

    def _touch(self) -> None:
        self._revision += 1


__all__ = ["SelectorRegistry", "SelectorConflictError", "RegistryStats"]
