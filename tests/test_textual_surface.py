from __future__ import annotations

import threading
from typing import List

import pytest
from rich.text import Text

from rtt.adapters.textual import SurfaceHooks, TextualSurface, normalize_key
from rtt.config import EditorConfig
from rtt.editor import KeyInput, SurfaceClosedError
from rtt.editor.controller import Editor


def make_surface(width: int = 20, height: int = 5):
    frames: List[Text] = []
    hooks = SurfaceHooks(
        viewport_size=lambda: (width, height),
        publish=frames.append,
    )
    return TextualSurface(hooks), frames


@pytest.mark.parametrize(
    ("key", "character", "printable", "expected"),
    [
        ("up", None, False, KeyInput(key="UP")),
        ("pagedown", None, False, KeyInput(key="PAGEDOWN")),
        ("escape", None, False, KeyInput(key="ESC")),
        ("enter", "\r", False, KeyInput(key="ENTER")),
        ("tab", "\t", False, KeyInput(key="TAB", text="\t")),
        ("ctrl+q", None, False, KeyInput(key="q", modifiers=("CTRL",))),
        ("ctrl+home", None, False, KeyInput(key="HOME", modifiers=("CTRL",))),
        ("a", "a", True, KeyInput(key="a", text="a")),
        ("exclamation_mark", "!", True, KeyInput(key="!", text="!")),
        ("f5", None, False, KeyInput(key="F5")),
    ],
)
def test_normalize_key(key, character, printable, expected) -> None:
    assert normalize_key(key, character, is_printable=printable) == expected


def test_normalize_key_rejects_empty_name() -> None:
    assert normalize_key("") is None


def test_write_places_text_and_flush_publishes() -> None:
    surface, frames = make_surface()

    surface.clear_screen()
    surface.move_cursor_to(1, 3)
    surface.write("abc")
    surface.move_cursor_to(1, 0)
    surface.write("X")
    surface.flush()

    assert surface.plain_rows() == ["", "X  abc", "", "", ""]
    assert surface.cursor == (1, 1)
    assert len(frames) == 1
    assert frames[0].plain.split("\n")[1] == "X  abc"


def test_write_truncates_to_viewport_width() -> None:
    surface, _ = make_surface(width=5)

    surface.clear_screen()
    surface.write("abcdefgh")

    assert surface.plain_rows()[0] == "abcde"


def test_clear_current_line_and_colors() -> None:
    surface, _ = make_surface()
    surface.clear_screen()
    surface.write("old text")

    surface.clear_current_line()
    surface.move_cursor_to(0, 0)
    surface.set_background("rgb(239,239,239)")
    surface.set_foreground("rgb(63,63,63)")
    surface.write("bar")
    surface.reset_colors()
    surface.write("!")

    row = surface.snapshot().split("\n")[0]
    assert row.plain.startswith("bar!")
    styled = [span for span in row.spans if span.end <= 3]
    assert styled
    assert "rgb(239,239,239)" in str(styled[0].style)


def test_snapshot_marks_caret_past_line_end() -> None:
    surface, _ = make_surface()
    surface.clear_screen()
    surface.write("ab")
    surface.move_cursor_to(0, 4)

    first_row = surface.snapshot().split("\n")[0]

    assert first_row.plain == "ab   "
    assert any(span.start == 4 and span.end == 5 for span in first_row.spans)
    assert surface.plain_rows()[0] == "ab"


def test_read_next_key_returns_pushed_keys_in_order() -> None:
    surface, _ = make_surface()
    surface.push_key(KeyInput(key="a", text="a"))
    surface.push_key(KeyInput(key="UP"))

    assert surface.read_next_key().key == "a"
    assert surface.read_next_key().key == "UP"


def test_close_wakes_blocked_reader() -> None:
    surface, _ = make_surface()
    errors: List[BaseException] = []

    def reader() -> None:
        try:
            surface.read_next_key()
        except SurfaceClosedError as exc:
            errors.append(exc)

    thread = threading.Thread(target=reader)
    thread.start()
    surface.close()
    thread.join(timeout=2)

    assert not thread.is_alive()
    assert len(errors) == 1
    assert surface.closed
    with pytest.raises(SurfaceClosedError):
        surface.read_next_key()
    surface.push_key(KeyInput(key="a", text="a"))
    with pytest.raises(SurfaceClosedError):
        surface.read_next_key()


def test_editor_runs_against_textual_surface() -> None:
    surface, frames = make_surface(width=30, height=6)
    for ch in "hi":
        surface.push_key(KeyInput(key=ch, text=ch))
    surface.push_key(KeyInput(key="q", modifiers=("CTRL",)))
    for _ in range(3):
        surface.push_key(KeyInput(key="q", modifiers=("CTRL",)))
    editor = Editor(surface, config=EditorConfig())

    editor.run()

    assert editor.should_quit
    assert editor.buffer.lines() == ("hi",)
    assert frames[-1].plain.startswith("Goodbye.")
    rendered = [frame.plain.split("\n") for frame in frames[:-1]]
    assert rendered[-1][0].rstrip() == "hi"
    assert rendered[-1][4].startswith("[No Name] - 1 lines (modified)")
