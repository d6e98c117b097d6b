"""Textual host adapter for the selection engine."""

from .controller import (
    TextAreaHost,
    TextualSelectionAdapter,
    TextualUIHooks,
    create_default_registry,
)

__all__ = [
    "TextAreaHost",
    "TextualSelectionAdapter",
    "TextualUIHooks",
    "create_default_registry",
]
