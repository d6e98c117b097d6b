"""Post-selection cursor actions."""

from .cursor import (
    collapse_to_back,
    collapse_to_front,
    exchange_point_and_mark,
    trim_selection,
)

__all__ = [
    "collapse_to_front",
    "collapse_to_back",
    "exchange_point_and_mark",
    "trim_selection",
]
