from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Tuple

import pytest

from rtt.editor import KeyInput, SurfaceClosedError


class ScriptedSurface:
    """Display surface replaying a fixed key script and recording draw calls."""

    def __init__(
        self, keys: Iterable[KeyInput] = (), *, width: int = 40, height: int = 12
    ) -> None:
        self.keys: Deque[KeyInput] = deque(keys)
        self.width = width
        self.height = height
        self.calls: List[Tuple[str, tuple]] = []
        self.frames: List[List[str]] = []
        self._rows: List[str] = []
        self._row = 0
        self._col = 0

    def feed(self, *keys: KeyInput) -> None:
        self.keys.extend(keys)

    def query_viewport_size(self) -> Tuple[int, int]:
        return self.width, self.height

    def read_next_key(self) -> KeyInput:
        if not self.keys:
            raise SurfaceClosedError("script exhausted")
        return self.keys.popleft()

    def clear_screen(self) -> None:
        self.calls.append(("clear_screen", ()))
        self._rows = [""] * self.height

    def clear_current_line(self) -> None:
        self.calls.append(("clear_current_line", ()))
        self._rows[self._row] = ""

    def move_cursor_to(self, row: int, col: int) -> None:
        self.calls.append(("move_cursor_to", (row, col)))
        self._row, self._col = row, col

    def write(self, text: str) -> None:
        self.calls.append(("write", (text,)))
        line = self._rows[self._row].ljust(self._col)
        self._rows[self._row] = line[: self._col] + text + line[self._col + len(text) :]
        self._col += len(text)

    def flush(self) -> None:
        self.calls.append(("flush", ()))
        self.frames.append(list(self._rows))

    def set_foreground(self, color: str) -> None:
        self.calls.append(("set_foreground", (color,)))

    def set_background(self, color: str) -> None:
        self.calls.append(("set_background", (color,)))

    def reset_colors(self) -> None:
        self.calls.append(("reset_colors", ()))

    @property
    def last_frame(self) -> List[str]:
        return self.frames[-1]


def char(ch: str) -> KeyInput:
    return KeyInput(key=ch, text=ch)


def named(key: str) -> KeyInput:
    return KeyInput(key=key)


def ctrl(ch: str) -> KeyInput:
    return KeyInput(key=ch, modifiers=("CTRL",))


def typed(text: str) -> List[KeyInput]:
    return [char(ch) for ch in text]


@pytest.fixture
def surface() -> ScriptedSurface:
    return ScriptedSurface()
