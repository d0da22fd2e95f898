"""Shared types passed between the editor, its actions and its host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from rtt.buffer import Buffer, ViewState
from rtt.config import EditorConfig


@dataclass(slots=True)
class KeyInput:
    """Normalized key event read from the display surface.

    ``key`` is either the character itself or a named key (``UP``, ``ENTER``,
    ``ESC`` ...). ``text`` carries printable input, if any.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def ctrl(self) -> bool:
        return any(mod.upper() == "CTRL" for mod in self.modifiers)


@dataclass(slots=True)
class CommandResult:
    """Result returned from an action or from ``Editor.handle_key``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


class EditorHost(Protocol):
    """Services an action may ask of the editor that owns it."""

    def text_area_size(self) -> Tuple[int, int]:
        """Return ``(width, height)`` of the rows that show document text."""
        ...

    def set_status_message(self, text: str) -> None:
        ...

    def prompt(self, text: str) -> Optional[str]:
        """Collect one line of input; ``None`` when cancelled or empty."""
        ...


@dataclass(slots=True)
class EditorContext:
    """Everything actions can touch: the buffer, the view and the host."""

    buffer: Buffer
    view: ViewState
    config: EditorConfig
    host: EditorHost
    quit_times: Optional[int] = None

    def __post_init__(self) -> None:
        if self.quit_times is None:
            self.quit_times = self.config.quit_times

    def reset_quit_times(self) -> None:
        self.quit_times = self.config.quit_times


__all__ = [
    "KeyInput",
    "CommandResult",
    "EditorHost",
    "EditorContext",
]
