"""Actions for the save and quit protocols."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rtt.buffer import DocumentError
from rtt.editor.base import CommandResult, EditorContext
from rtt.runtime import telemetry

if TYPE_CHECKING:
    from rtt.keymaps import ResolutionMatch

SAVE_PROMPT = "Save as: "
SAVE_ABORTED = "Save aborted."
SAVE_OK = "File saved successfully."
QUIT_WARNING = (
    "WARNING! File has unsaved changes. Press Ctrl-Q {times} more times to quit."
)


def save(context: EditorContext, match: ResolutionMatch) -> CommandResult:
    del match
    buffer = context.buffer
    target = buffer.path
    if not target:
        target = context.host.prompt(SAVE_PROMPT)
        if target is None:
            context.host.set_status_message(SAVE_ABORTED)
            return CommandResult(consumed=True, status="save_aborted")

    try:
        written = buffer.save(target)
    except DocumentError as exc:
        message = f"Error writing file: {exc}"
        telemetry.record_event(
            "editor.save_failed",
            level="error",
            data={"path": target, "reason": str(exc)},
        )
        context.host.set_status_message(message)
        return CommandResult(consumed=True, status="save_failed", message=message)

    telemetry.record_event(
        "editor.save",
        data={"path": target, "chars": written, "lines": buffer.line_count},
    )
    context.host.set_status_message(SAVE_OK)
    return CommandResult(consumed=True, status="saved", message=target)


def quit_editor(context: EditorContext, match: ResolutionMatch) -> CommandResult:
    """Quit, unless unsaved changes still need confirming."""

    del match
    remaining = context.quit_times or 0
    if context.buffer.is_dirty() and remaining > 0:
        context.host.set_status_message(QUIT_WARNING.format(times=remaining))
        context.quit_times = remaining - 1
        telemetry.record_event("editor.quit_blocked", data={"remaining": remaining})
        return CommandResult(consumed=True, status="quit_pending")

    telemetry.record_event(
        "editor.quit", data={"dirty": context.buffer.is_dirty()}
    )
    return CommandResult(consumed=True, status="quit", quit=True)


__all__ = [
    "save",
    "quit_editor",
    "SAVE_PROMPT",
    "SAVE_ABORTED",
    "SAVE_OK",
    "QUIT_WARNING",
]
