"""Clamping helpers shared by every cursor transition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .state import Position

if TYPE_CHECKING:
    from .buffer import Buffer


def line_length(buffer: "Buffer", y: int) -> int:
    line = buffer.line_at(y)
    return len(line) if line is not None else 0


def clamp_position(buffer: "Buffer", position: Position) -> Position:
    """Pull ``x`` back onto the line at ``y`` (0 past the end of the document)."""

    limit = line_length(buffer, position.y)
    if position.x > limit:
        return Position(limit, position.y)
    return position


__all__ = ["line_length", "clamp_position"]
