"""Display surface backed by a Rich text grid, fed by Textual key events."""

from __future__ import annotations

import queue
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from rich.style import Style
from rich.text import Text

from rtt.editor import KeyInput, SurfaceClosedError


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


NAMED_KEYS = {
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "pageup": "PAGEUP",
    "page_up": "PAGEUP",
    "pagedown": "PAGEDOWN",
    "page_down": "PAGEDOWN",
    "home": "HOME",
    "end": "END",
    "delete": "DELETE",
    "backspace": "BACKSPACE",
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "tab": "TAB",
}

CURSOR_STYLE = Style(reverse=True)


def normalize_key(
    key: str, character: Optional[str] = None, *, is_printable: bool = False
) -> Optional[KeyInput]:
    """Translate a Textual key name (``"ctrl+s"``, ``"up"``, ``"a"``) to KeyInput."""

    if not key:
        return None
    named = NAMED_KEYS.get(key)
    if named == "TAB":
        return KeyInput(key="TAB", text="\t")
    if named is not None:
        return KeyInput(key=named)
    if key.startswith("ctrl+"):
        rest = key[len("ctrl+") :]
        if len(rest) == 1:
            return KeyInput(key=rest, modifiers=("CTRL",))
        return KeyInput(key=rest.upper(), modifiers=("CTRL",))
    if character and is_printable:
        return KeyInput(key=character, text=character)
    return KeyInput(key=key.upper())


@dataclass(slots=True)
class SurfaceHooks:
    """Callbacks wiring the surface to its host application."""

    viewport_size: Callable[[], Tuple[int, int]]
    publish: Callable[[Text], None]
    log: Callable[[str], None] = _noop


class TextualSurface:
    """In-memory terminal grid implementing ``DisplaySurface``.

    The editor thread draws into the grid and blocks in ``read_next_key``;
    the UI thread feeds keys with ``push_key`` and receives whole frames
    through ``hooks.publish`` on every ``flush``.
    """

    def __init__(self, hooks: SurfaceHooks) -> None:
        self.hooks = hooks
        self._keys: "queue.Queue[Optional[KeyInput]]" = queue.Queue()
        self._rows: List[Text] = []
        self._row = 0
        self._col = 0
        self._foreground: Optional[str] = None
        self._background: Optional[str] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    # Input side -------------------------------------------------------------
    def push_key(self, key: KeyInput) -> None:
        if not self._closed:
            self._keys.put(key)

    def close(self) -> None:
        """Wake any blocked reader; further reads raise ``SurfaceClosedError``."""

        self._closed = True
        self._keys.put(None)

    def read_next_key(self) -> KeyInput:
        if self._closed and self._keys.empty():
            raise SurfaceClosedError("display surface closed")
        key = self._keys.get()
        if key is None:
            self._keys.put(None)
            raise SurfaceClosedError("display surface closed")
        self.hooks.log(f"key -> {key.key!r} mods={key.modifiers!r}")
        return key

    # Output side ------------------------------------------------------------
    def query_viewport_size(self) -> Tuple[int, int]:
        width, height = self.hooks.viewport_size()
        return max(width, 1), max(height, 1)

    def clear_screen(self) -> None:
        _, height = self.query_viewport_size()
        self._rows = [Text() for _ in range(height)]
        self._row = 0
        self._col = 0

    def clear_current_line(self) -> None:
        self._ensure_row(self._row)
        self._rows[self._row] = Text()

    def move_cursor_to(self, row: int, col: int) -> None:
        self._row = max(row, 0)
        self._col = max(col, 0)

    def write(self, text: str) -> None:
        if not text:
            return
        width, _ = self.query_viewport_size()
        self._ensure_row(self._row)
        current = self._rows[self._row]
        if len(current) < self._col:
            current = current + Text(" " * (self._col - len(current)))
        end = self._col + len(text)
        head = current[: self._col] if self._col else Text()
        tail = current[end:] if end < len(current) else Text()
        updated = head + Text(text, style=self._style()) + tail
        updated.truncate(width)
        self._rows[self._row] = updated
        self._col += len(text)

    def flush(self) -> None:
        self.hooks.publish(self.snapshot())

    def set_foreground(self, color: str) -> None:
        self._foreground = color

    def set_background(self, color: str) -> None:
        self._background = color

    def reset_colors(self) -> None:
        self._foreground = None
        self._background = None

    # Helpers ----------------------------------------------------------------
    @property
    def cursor(self) -> Tuple[int, int]:
        return self._row, self._col

    def plain_rows(self) -> List[str]:
        return [row.plain for row in self._rows]

    def snapshot(self) -> Text:
        """Current grid as one Text, with the caret cell shown reversed."""

        rows = [row.copy() for row in self._rows]
        if 0 <= self._row < len(rows):
            caret_row = rows[self._row]
            if len(caret_row) <= self._col:
                caret_row.append(" " * (self._col - len(caret_row) + 1))
            caret_row.stylize(CURSOR_STYLE, self._col, self._col + 1)
        return Text("\n").join(rows)

    def _style(self) -> Style:
        return Style(color=self._foreground, bgcolor=self._background)

    def _ensure_row(self, row: int) -> None:
        while len(self._rows) <= row:
            self._rows.append(Text())


__all__ = ["TextualSurface", "SurfaceHooks", "normalize_key", "NAMED_KEYS"]
