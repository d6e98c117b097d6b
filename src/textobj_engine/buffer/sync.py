"""Capability boundary between the selection engine and a host editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class LexicalContext:
    """String context reported for a single offset."""

    in_string: bool
    string_start: Optional[int] = None


@runtime_checkable
class BufferCapability(Protocol):
    """Read-only text access the engine needs from a host buffer."""

    def length(self) -> int:
        ...

    def char_at(self, offset: int) -> Optional[str]:
        """Return the character at ``offset`` or ``None`` when out of range."""
        ...

    def substring(self, start: int, end: int) -> str:
        ...

    def line_start(self, offset: int) -> int:
        ...

    def line_end(self, offset: int) -> int:
        ...


class CursorCapability(Protocol):
    """Live point/mark pair owned by the host."""

    def get_point(self) -> int:
        ...

    def get_mark(self) -> int:
        ...

    def set_point(self, offset: int) -> None:
        ...

    def set_mark(self, offset: int) -> None:
        ...

    def is_selection_active(self) -> bool:
        ...

    def activate_selection(self) -> None:
        ...

    def deactivate_selection(self) -> None:
        ...


class BufferValidationError(RuntimeError):
    """Raised when hosts or callers provide out-of-bounds offsets."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset
