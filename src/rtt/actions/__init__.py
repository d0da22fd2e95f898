"""Editing verbs bound to keys by the default keymap."""

from .command import quit_editor, save
from .core import (
    backspace,
    delete_forward,
    insert_char,
    insert_newline,
    move_cursor,
    move_down,
    move_end,
    move_home,
    move_left,
    move_right,
    move_up,
    page_down,
    page_up,
)

__all__ = [
    "quit_editor",
    "save",
    "backspace",
    "delete_forward",
    "insert_char",
    "insert_newline",
    "move_cursor",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "page_up",
    "page_down",
    "move_home",
    "move_end",
]
