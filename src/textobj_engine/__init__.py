"""Cursor-relative text-object selection engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "registry",
    "runtime",
    "selectors",
]

__version__ = "0.1.0"
