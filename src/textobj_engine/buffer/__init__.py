"""Buffer abstractions: documents, cursors, and host capabilities."""

from .buffer import Buffer, BufferView, CursorTransaction
from .document import TextDocument
from .state import Cursor, Span
from .sync import (
    BufferCapability,
    BufferValidationError,
    CursorCapability,
    LexicalContext,
)
from .validation import ensure_offset

__all__ = [
    "Buffer",
    "BufferView",
    "CursorTransaction",
    "TextDocument",
    "Cursor",
    "Span",
    "BufferCapability",
    "CursorCapability",
    "BufferValidationError",
    "LexicalContext",
    "ensure_offset",
]
