"""Metadata describing a named selector or cursor action."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

SelectorHandler = Callable[..., object]


def _dedupe_tags(tags: Iterable[str]) -> tuple[str, ...]:
    cleaned = (tag.strip() for tag in tags)
    return tuple(dict.fromkeys(tag for tag in cleaned if tag))


@dataclass(frozen=True, slots=True)
class SelectorRef:
    """A dispatchable operation keyed by a dotted ``namespace.name`` id.

    ``select.*`` ids compute a new region; ``cursor.*`` ids act on the
    current one. ``telemetry_name`` names the dispatch span and defaults to
    the id.
    """

    id: str
    handler: SelectorHandler
    telemetry_name: str | None = None
    description: str = ""
    tags: tuple[str, ...] = ()
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        namespace, _, name = self.id.partition(".")
        if not namespace or not name:
            raise ValueError(f"SelectorRef id '{self.id}' must look like 'namespace.name'")
        if not callable(self.handler):
            raise TypeError(f"handler for '{self.id}' must be callable")
        object.__setattr__(self, "tags", _dedupe_tags(self.tags))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        object.__setattr__(self, "telemetry_name", self.telemetry_name or self.id)

    @property
    def namespace(self) -> str:
        return self.id.partition(".")[0]

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


__all__ = ["SelectorHandler", "SelectorRef"]
