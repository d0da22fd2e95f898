"""Built-in key bindings: the editor's dispatch table."""

from __future__ import annotations

from typing import Iterable, Sequence

from rtt.actions import command as command_actions
from rtt.actions import core as core_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="editor.quit",
        handler=command_actions.quit_editor,
        description="Quit, confirming unsaved changes",
    ),
    ActionRef(
        id="editor.save",
        handler=command_actions.save,
        description="Write the buffer to disk",
    ),
    ActionRef(id="cursor.up", handler=core_actions.move_up, description="Line up"),
    ActionRef(
        id="cursor.down", handler=core_actions.move_down, description="Line down"
    ),
    ActionRef(
        id="cursor.left",
        handler=core_actions.move_left,
        description="Column left, wrapping to the previous line",
    ),
    ActionRef(
        id="cursor.right",
        handler=core_actions.move_right,
        description="Column right, wrapping to the next line",
    ),
    ActionRef(
        id="cursor.page_up", handler=core_actions.page_up, description="Screen up"
    ),
    ActionRef(
        id="cursor.page_down",
        handler=core_actions.page_down,
        description="Screen down",
    ),
    ActionRef(
        id="cursor.home", handler=core_actions.move_home, description="Line start"
    ),
    ActionRef(id="cursor.end", handler=core_actions.move_end, description="Line end"),
    ActionRef(
        id="edit.newline",
        handler=core_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.backspace",
        handler=core_actions.backspace,
        description="Delete the character left of the cursor",
    ),
    ActionRef(
        id="edit.delete",
        handler=core_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
)


def _bind(binding_id: str, key: str, action_id: str, description: str) -> Binding:
    return Binding(
        id=binding_id,
        stroke=KeyStroke.parse(key),
        action_id=action_id,
        description=description,
        source="defaults",
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("quit", "ctrl+q", "editor.quit", "Quit"),
    _bind("save", "ctrl+s", "editor.save", "Save"),
    _bind("up", "UP", "cursor.up", "Move up"),
    _bind("down", "DOWN", "cursor.down", "Move down"),
    _bind("left", "LEFT", "cursor.left", "Move left"),
    _bind("right", "RIGHT", "cursor.right", "Move right"),
    _bind("page_up", "PAGEUP", "cursor.page_up", "Page up"),
    _bind("page_down", "PAGEDOWN", "cursor.page_down", "Page down"),
    _bind("home", "HOME", "cursor.home", "Start of line"),
    _bind("end", "END", "cursor.end", "End of line"),
    _bind("enter", "ENTER", "edit.newline", "New line"),
    _bind("return", "RETURN", "edit.newline", "New line"),
    _bind("backspace", "BACKSPACE", "edit.backspace", "Delete backwards"),
    _bind("ctrl_h", "ctrl+h", "edit.backspace", "Delete backwards"),
    _bind("delete", "DELETE", "edit.delete", "Delete forwards"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings, plus any caller extras."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
