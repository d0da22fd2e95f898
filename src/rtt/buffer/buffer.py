"""Ordered line buffer with file identity and dirty tracking."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Iterable, Iterator, List, Optional

from rtt.config import TAB_STOP
from rtt.runtime import telemetry

from .document import DocumentError, read_lines, write_lines
from .line import Line
from .state import Position

NEWLINE = "\n"


class Buffer:
    """The in-memory document: Lines indexed by 0-based line number.

    Column arguments are trusted to be clamped by the caller; only the line
    index is checked here.
    """

    def __init__(
        self,
        lines: Optional[Iterable[str]] = None,
        *,
        path: Optional[str] = None,
        tab_stop: int = TAB_STOP,
        encoding: str = "utf-8",
    ) -> None:
        self._tab_stop = tab_stop
        self._lines: List[Line] = [Line(text, tab_stop=tab_stop) for text in lines or ()]
        self.path = path
        self.encoding = encoding
        self._dirty = False

    @classmethod
    def open(
        cls, path: str, *, tab_stop: int = TAB_STOP, encoding: str = "utf-8"
    ) -> "Buffer":
        """Load ``path``; raises ``DocumentError`` without building a buffer."""

        with telemetry.span("buffer::open", component="buffer", metadata={"path": path}):
            lines = read_lines(path, encoding=encoding)
        return cls(lines, path=path, tab_stop=tab_stop, encoding=encoding)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        path: Optional[str] = None,
        tab_stop: int = TAB_STOP,
        encoding: str = "utf-8",
    ) -> "Buffer":
        return cls(text.splitlines(), path=path, tab_stop=tab_stop, encoding=encoding)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def name(self) -> str:
        return self.path or "[No Name]"

    def line_at(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def lines(self) -> tuple[str, ...]:
        return tuple(line.text for line in self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def is_dirty(self) -> bool:
        return self._dirty

    def insert_char(self, position: Position, ch: str) -> None:
        x, y = position
        if y > len(self._lines):
            return
        with Transaction(self, "insert_char"):
            if y == len(self._lines):
                self._lines.append(
                    Line("" if ch == NEWLINE else ch, tab_stop=self._tab_stop)
                )
            elif ch == NEWLINE:
                tail = self._lines[y].split(x)
                self._lines.insert(y + 1, tail)
            else:
                self._lines[y].insert(x, ch)
            self._dirty = True

    def delete_char(self, position: Position) -> None:
        x, y = position
        if y >= len(self._lines):
            return
        with Transaction(self, "delete_char"):
            line = self._lines[y]
            if x == len(line) and y + 1 < len(self._lines):
                line.append(self._lines.pop(y + 1))
                self._dirty = True
            elif line.delete(x):
                self._dirty = True

    def save(self, path: Optional[str] = None) -> int:
        """Write every line to disk; returns the characters written.

        A ``path`` argument names (or renames) the buffer. The dirty flag is
        cleared only after the write succeeded.
        """

        target = path or self.path
        if not target:
            raise DocumentError("No file name")
        with telemetry.span(
            "buffer::save", component="buffer", metadata={"path": target}
        ):
            written = write_lines(target, self.lines(), encoding=self.encoding)
        self.path = target
        self._dirty = False
        return written


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one buffer mutation in a telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name, "lines": self.buffer.line_count},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "Transaction", "NEWLINE"]
