"""Frame composition: what the screen shows for one editor state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from rtt.buffer import Buffer, ViewState
from rtt.config import RESERVED_ROWS, EditorConfig

from .surface import DisplaySurface

EMPTY_ROW = "~"
GOODBYE = "Goodbye."


@dataclass(slots=True)
class Frame:
    rows: List[str]
    status_bar: str
    message: str
    cursor: Tuple[int, int]


def text_area_size(width: int, height: int) -> Tuple[int, int]:
    """Screen cells left for document text once the two bars are reserved."""

    return max(width, 1), max(height - RESERVED_ROWS, 1)


def welcome_line(version: str, width: int) -> str:
    welcome = f"RTT editor -- version {version}"[:width]
    padding = (width - len(welcome)) // 2
    if padding <= 0:
        return welcome
    return f"{EMPTY_ROW}{' ' * (padding - 1)}{welcome}"[:width]


def status_bar(buffer: Buffer, view: ViewState, width: int) -> str:
    modified = " (modified)" if buffer.is_dirty() else ""
    left = f"{buffer.name:.20} - {buffer.line_count} lines{modified}"
    right = f"{view.cursor.y + 1}/{buffer.line_count}"
    if len(left) + len(right) >= width:
        return left[:width].ljust(width)
    return left + " " * (width - len(left) - len(right)) + right


def compose_frame(
    buffer: Buffer,
    view: ViewState,
    *,
    width: int,
    height: int,
    version: str,
    message: Optional[str] = None,
) -> Frame:
    text_width, text_height = text_area_size(width, height)
    offset_x, offset_y = view.offset
    rows: List[str] = []
    for screen_row in range(text_height):
        line = buffer.line_at(screen_row + offset_y)
        if line is not None:
            rows.append(line.render(offset_x, offset_x + text_width))
        elif buffer.is_empty() and screen_row == text_height // 3:
            rows.append(welcome_line(version, text_width))
        else:
            rows.append(EMPTY_ROW)

    x, y = view.cursor
    line = buffer.line_at(y)
    column = line.render_column(x) if line is not None else x
    cursor = (
        min(max(y - offset_y, 0), text_height - 1),
        min(max(column - offset_x, 0), text_width - 1),
    )
    return Frame(
        rows=rows,
        status_bar=status_bar(buffer, view, text_width),
        message=(message or "")[:text_width],
        cursor=cursor,
    )


def draw_frame(surface: DisplaySurface, frame: Frame, config: EditorConfig) -> None:
    surface.clear_screen()
    for screen_row, text in enumerate(frame.rows):
        surface.move_cursor_to(screen_row, 0)
        surface.clear_current_line()
        surface.write(text)

    status_row = len(frame.rows)
    surface.move_cursor_to(status_row, 0)
    surface.clear_current_line()
    surface.set_background(config.status_background)
    surface.set_foreground(config.status_foreground)
    surface.write(frame.status_bar)
    surface.reset_colors()

    surface.move_cursor_to(status_row + 1, 0)
    surface.clear_current_line()
    surface.write(frame.message)

    surface.move_cursor_to(*frame.cursor)
    surface.flush()


def draw_goodbye(surface: DisplaySurface) -> None:
    surface.clear_screen()
    surface.move_cursor_to(0, 0)
    surface.write(GOODBYE)
    surface.flush()


__all__ = [
    "Frame",
    "compose_frame",
    "draw_frame",
    "draw_goodbye",
    "status_bar",
    "text_area_size",
    "welcome_line",
]
