"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .sync import BufferCapability, BufferValidationError


def ensure_offset(buffer: BufferCapability, offset: int) -> int:
    if offset < 0 or offset > buffer.length():
        raise BufferValidationError("Offset out of range", offset=offset)
    return offset

