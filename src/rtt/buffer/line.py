"""Single line of text plus its tab-expanded render cache."""

from __future__ import annotations

from rtt.config import TAB_STOP


def expand_tabs(text: str, tab_stop: int = TAB_STOP) -> str:
    """Replace each tab with spaces up to the next multiple of ``tab_stop``."""

    if "\t" not in text:
        return text
    out: list[str] = []
    column = 0
    for ch in text:
        if ch == "\t":
            pad = tab_stop - (column % tab_stop)
            out.append(" " * pad)
            column += pad
        else:
            out.append(ch)
            column += 1
    return "".join(out)


class Line:
    """Mutable line whose rendered form is kept coherent with its raw text.

    Callers never touch ``_raw`` directly: every mutation goes through the
    methods below so the render cache cannot go stale.
    """

    __slots__ = ("_raw", "_render", "_tab_stop")

    def __init__(self, text: str = "", *, tab_stop: int = TAB_STOP) -> None:
        self._raw = text
        self._tab_stop = tab_stop
        self._render = ""
        self._update()

    def __len__(self) -> int:
        return len(self._raw)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Line):
            return self._raw == other._raw
        return NotImplemented

    def __repr__(self) -> str:
        return f"Line({self._raw!r})"

    @property
    def text(self) -> str:
        return self._raw

    @property
    def rendered(self) -> str:
        return self._render

    @property
    def length(self) -> int:
        return len(self._raw)

    def render(self, start: int, end: int) -> str:
        """Visible slice of the rendered form, ``[start, end)`` clamped."""

        size = len(self._render)
        start = max(start, 0)
        end = min(end, size)
        if start >= end:
            return ""
        return self._render[start:end]

    def render_column(self, x: int) -> int:
        """Map a raw column to the column it occupies once tabs are expanded."""

        column = 0
        for ch in self._raw[: max(x, 0)]:
            if ch == "\t":
                column += self._tab_stop - (column % self._tab_stop)
            else:
                column += 1
        return column

    def insert(self, at: int, ch: str) -> None:
        at = min(max(at, 0), len(self._raw))
        self._raw = self._raw[:at] + ch + self._raw[at:]
        self._update()

    def delete(self, at: int) -> bool:
        """Remove the character at ``at``; returns ``False`` when out of range."""

        if at < 0 or at >= len(self._raw):
            return False
        self._raw = self._raw[:at] + self._raw[at + 1 :]
        self._update()
        return True

    def split(self, at: int) -> "Line":
        at = min(max(at, 0), len(self._raw))
        tail = Line(self._raw[at:], tab_stop=self._tab_stop)
        self._raw = self._raw[:at]
        self._update()
        return tail

    def append(self, other: "Line") -> None:
        self._raw += other._raw
        self._update()

    def _update(self) -> None:
        self._render = expand_tabs(self._raw, self._tab_stop)


__all__ = ["Line", "expand_tabs"]
