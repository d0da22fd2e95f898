"""Cursor and viewport-offset state for the single open buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from .buffer import Buffer


class Position(NamedTuple):
    """Document coordinate: ``x`` is the column, ``y`` the line."""

    x: int = 0
    y: int = 0


class Motion(str, Enum):
    """Navigation commands understood by ``ViewState.move``."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


@dataclass(slots=True)
class ViewState:
    """Cursor position plus the document coordinate shown at screen (0, 0)."""

    cursor: Position = field(default_factory=Position)
    offset: Position = field(default_factory=Position)

    def move(self, motion: Motion, buffer: "Buffer", *, height: int) -> Position:
        """Apply one navigation command, clamp, and return the new cursor.

        Only LEFT and RIGHT cross line boundaries. Scrolling is left to
        ``scroll`` so callers can recompute it after edits as well.
        """

        from .validation import clamp_position, line_length

        x, y = self.cursor
        doc_len = buffer.line_count
        if motion is Motion.UP:
            y = max(y - 1, 0)
        elif motion is Motion.DOWN:
            y = min(y + 1, doc_len)
        elif motion is Motion.LEFT:
            if x > 0:
                x -= 1
            elif y > 0:
                y -= 1
                x = line_length(buffer, y)
        elif motion is Motion.RIGHT:
            if x < line_length(buffer, y):
                x += 1
            elif y < doc_len:
                y += 1
                x = 0
        elif motion is Motion.PAGE_UP:
            y = max(y - height, 0)
        elif motion is Motion.PAGE_DOWN:
            y = min(y + height, doc_len)
        elif motion is Motion.HOME:
            x = 0
        elif motion is Motion.END:
            x = line_length(buffer, y)

        self.cursor = clamp_position(buffer, Position(x, y))
        return self.cursor

    def scroll(
        self, *, width: int, height: int, buffer: Optional["Buffer"] = None
    ) -> Position:
        """Shift the offset just far enough to keep the cursor on screen.

        ``offset.x`` counts rendered columns: with a ``buffer`` the cursor's
        raw column is mapped through the line's tab expansion first.
        """

        x, y = self.cursor
        if buffer is not None:
            line = buffer.line_at(y)
            if line is not None:
                x = line.render_column(x)
        offset_x, offset_y = self.offset
        height = max(height, 1)
        width = max(width, 1)
        if y < offset_y:
            offset_y = y
        elif y >= offset_y + height:
            offset_y = y - height + 1
        if x < offset_x:
            offset_x = x
        elif x >= offset_x + width:
            offset_x = x - width + 1
        self.offset = Position(offset_x, offset_y)
        return self.offset


__all__ = ["Position", "Motion", "ViewState"]
