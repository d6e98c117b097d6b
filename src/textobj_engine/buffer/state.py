"""Cursor and span values shared by every selector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` offset range."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Span start {self.start} exceeds end {self.end}")

    @classmethod
    def ordered(cls, a: int, b: int) -> "Span":
        return cls(min(a, b), max(a, b))

    @property
    def empty(self) -> bool:
        return self.start == self.end

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(slots=True)
class Cursor:
    """Mutable point/mark pair plus the selection-active flag."""

    point: int = 0
    mark: int = 0
    active: bool = False

    def get_point(self) -> int:
        return self.point

    def get_mark(self) -> int:
        return self.mark

    def set_point(self, offset: int) -> None:
        self.point = offset

    def set_mark(self, offset: int) -> None:
        self.mark = offset

    def is_selection_active(self) -> bool:
        return self.active

    def activate_selection(self) -> None:
        self.active = True

    def deactivate_selection(self) -> None:
        self.active = False

    @property
    def region(self) -> Span:
        return Span.ordered(self.point, self.mark)
