"""Engine settings and environment overrides.

All knobs read from the environment share the ``TEXTOBJ_ENGINE_`` prefix so a
host can tune character classes without touching code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "TEXTOBJ_ENGINE_"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Character classes consumed by the default text classifier."""

    word_chars: str = "_"
    quote_chars: str = "\"'"
    sentence_terminators: str = ".!?"
    sentence_closers: str = ")]\"'"
    scan_strings: bool = True

    def __post_init__(self) -> None:
        if not self.quote_chars:
            raise ValueError("quote_chars cannot be empty")
        if not self.sentence_terminators:
            raise ValueError("sentence_terminators cannot be empty")

    @classmethod
    def from_env(cls) -> "EngineSettings":
        defaults = cls()
        return cls(
            word_chars=env("WORD_CHARS", defaults.word_chars) or "",
            quote_chars=env("QUOTE_CHARS") or defaults.quote_chars,
            sentence_terminators=(
                env("SENTENCE_TERMINATORS") or defaults.sentence_terminators
            ),
            sentence_closers=env("SENTENCE_CLOSERS", defaults.sentence_closers)
            or "",
            scan_strings=env_flag("SCAN_STRINGS", defaults.scan_strings),
        )


__all__ = ["ENV_PREFIX", "EngineSettings", "env", "env_flag"]
