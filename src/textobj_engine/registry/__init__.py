"""Named-operation registry and the built-in selector catalog."""

from .models import SelectorRef
from .registry import RegistryStats, SelectorConflictError, SelectorRegistry
from .defaults import DEFAULT_SELECTORS, load_default_selectors

__all__ = [
    "SelectorRef",
    "SelectorRegistry",
    "SelectorConflictError",
    "RegistryStats",
    "DEFAULT_SELECTORS",
    "load_default_selectors",
]
