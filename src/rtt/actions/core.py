"""Navigation and editing actions bound in the default keymap."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rtt.buffer import NEWLINE, Motion, Position
from rtt.editor.base import CommandResult, EditorContext

if TYPE_CHECKING:
    from rtt.keymaps import ResolutionMatch


def move_cursor(
    context: EditorContext, match: ResolutionMatch, *, motion: Motion
) -> CommandResult:
    del match
    _, height = context.host.text_area_size()
    context.view.move(motion, context.buffer, height=height)
    return CommandResult(consumed=True, status="move", message=motion.value)


def insert_char(context: EditorContext, ch: str) -> CommandResult:
    """Insert ``ch`` at the cursor, then step right past it."""

    context.buffer.insert_char(context.view.cursor, ch)
    _, height = context.host.text_area_size()
    context.view.move(Motion.RIGHT, context.buffer, height=height)
    return CommandResult(consumed=True, status="insert")


def insert_newline(context: EditorContext, match: ResolutionMatch) -> CommandResult:
    del match
    return insert_char(context, NEWLINE)


def delete_forward(context: EditorContext, match: ResolutionMatch) -> CommandResult:
    del match
    context.buffer.delete_char(context.view.cursor)
    return CommandResult(consumed=True, status="delete")


def backspace(context: EditorContext, match: ResolutionMatch) -> CommandResult:
    del match
    if context.view.cursor == Position(0, 0):
        return CommandResult(consumed=True, status="noop")
    _, height = context.host.text_area_size()
    context.view.move(Motion.LEFT, context.buffer, height=height)
    context.buffer.delete_char(context.view.cursor)
    return CommandResult(consumed=True, status="delete")


move_up = partial(move_cursor, motion=Motion.UP)
move_down = partial(move_cursor, motion=Motion.DOWN)
move_left = partial(move_cursor, motion=Motion.LEFT)
move_right = partial(move_cursor, motion=Motion.RIGHT)
page_up = partial(move_cursor, motion=Motion.PAGE_UP)
page_down = partial(move_cursor, motion=Motion.PAGE_DOWN)
move_home = partial(move_cursor, motion=Motion.HOME)
move_end = partial(move_cursor, motion=Motion.END)


__all__ = [
    "move_cursor",
    "move_up",
    "move_down",
    "move_left",
    "move_right",
    "page_up",
    "page_down",
    "move_home",
    "move_end",
    "insert_char",
    "insert_newline",
    "delete_forward",
    "backspace",
]
