"""Editor controller pieces: key types, prompt, status line and rendering.

``Editor`` itself lives in ``rtt.editor.controller``.
"""

from .base import CommandResult, EditorContext, EditorHost, KeyInput
from .keys import is_backspace, is_enter, is_escape, printable_text
from .prompt import Prompt, PromptOutcome
from .render import Frame, compose_frame, draw_frame, draw_goodbye
from .status import StatusMessage
from .surface import DisplaySurface, SurfaceClosedError

__all__ = [
    "CommandResult",
    "EditorContext",
    "EditorHost",
    "KeyInput",
    "is_backspace",
    "is_enter",
    "is_escape",
    "printable_text",
    "Prompt",
    "PromptOutcome",
    "Frame",
    "compose_frame",
    "draw_frame",
    "draw_goodbye",
    "StatusMessage",
    "DisplaySurface",
    "SurfaceClosedError",
]
