"""Contract between the editor and whatever draws it on screen."""

from __future__ import annotations

from typing import Protocol, Tuple

from .base import KeyInput


class SurfaceClosedError(RuntimeError):
    """Raised by ``read_next_key`` once the display surface has gone away."""


class DisplaySurface(Protocol):
    """Terminal-like screen the editor draws into once per key press.

    A frame is drawn as: ``clear_screen``, then for every row
    ``move_cursor_to`` + ``clear_current_line`` + ``write``, the status bar
    between ``set_*``/``reset_colors``, the message bar, a final
    ``move_cursor_to`` for the caret, and ``flush``.
    """

    def query_viewport_size(self) -> Tuple[int, int]:
        """Return ``(width, height)`` in character cells."""
        ...

    def read_next_key(self) -> KeyInput:
        """Block until the next key event arrives."""
        ...

    def clear_screen(self) -> None:
        ...

    def clear_current_line(self) -> None:
        ...

    def move_cursor_to(self, row: int, col: int) -> None:
        ...

    def write(self, text: str) -> None:
        ...

    def flush(self) -> None:
        ...

    def set_foreground(self, color: str) -> None:
        ...

    def set_background(self, color: str) -> None:
        ...

    def reset_colors(self) -> None:
        ...


__all__ = ["DisplaySurface", "SurfaceClosedError"]
