"""The editor controller: owns the buffer and view, dispatches key events."""

from __future__ import annotations

import time
from typing import Optional, Tuple

from rtt import __version__
from rtt.actions import core as core_actions
from rtt.buffer import Buffer, DocumentError, ViewState
from rtt.config import EditorConfig
from rtt.keymaps import (
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    ResolutionMatch,
    load_default_keymaps,
)
from rtt.runtime import telemetry

from . import render
from .base import CommandResult, EditorContext, KeyInput
from .keys import printable_text
from .prompt import Prompt
from .status import Clock, StatusMessage
from .surface import DisplaySurface, SurfaceClosedError

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit"
QUIT_ACTION = "editor.quit"


class Editor:
    """Reads one key at a time from a surface and keeps the screen in sync."""

    def __init__(
        self,
        surface: DisplaySurface,
        *,
        buffer: Optional[Buffer] = None,
        config: Optional[EditorConfig] = None,
        keymap_registry: Optional[KeymapRegistry] = None,
        keymap_resolver: Optional[KeymapResolver] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.surface = surface
        self.config = config or EditorConfig()
        if buffer is None:
            buffer = Buffer(tab_stop=self.config.tab_stop, encoding=self.config.encoding)
        self.context = EditorContext(
            buffer=buffer, view=ViewState(), config=self.config, host=self
        )
        self.logger = telemetry.get_logger("rtt.editor")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="rtt.keymaps"
        )
        if keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="rtt.keymaps"
        )
        self.should_quit = False
        self._clock = clock
        self._status = StatusMessage.now(HELP_MESSAGE, clock=clock)

    @classmethod
    def open(
        cls,
        surface: DisplaySurface,
        path: Optional[str],
        *,
        config: Optional[EditorConfig] = None,
        **kwargs,
    ) -> "Editor":
        """Build an editor for ``path``, falling back to an empty buffer.

        A file that cannot be read is reported on the status line rather
        than raised.
        """

        config = config or EditorConfig()
        buffer = None
        failure = None
        if path:
            try:
                buffer = Buffer.open(
                    path, tab_stop=config.tab_stop, encoding=config.encoding
                )
            except DocumentError as exc:
                failure = f"Could not open {path}: {exc}"
                telemetry.record_event(
                    "editor.open_failed",
                    level="warning",
                    data={"path": path, "reason": str(exc)},
                )
            else:
                telemetry.record_event(
                    "editor.open", data={"path": path, "lines": buffer.line_count}
                )

        editor = cls(surface, buffer=buffer, config=config, **kwargs)
        if failure:
            editor.set_status_message(failure)
        return editor

    @property
    def buffer(self) -> Buffer:
        return self.context.buffer

    @property
    def view(self) -> ViewState:
        return self.context.view

    @property
    def status_text(self) -> Optional[str]:
        return self._status.visible(
            timeout=self.config.status_timeout, clock=self._clock
        )

    def run(self) -> None:
        """Refresh, read, dispatch until quit (or until the surface closes)."""

        with telemetry.span(
            "editor::session",
            component="editor",
            metadata={"buffer": self.buffer.name},
        ):
            try:
                while not self.should_quit:
                    self.refresh_screen()
                    self.process_keypress()
                self.refresh_screen()
            except SurfaceClosedError:
                self.should_quit = True
                telemetry.record_event("editor.surface_closed", level="warning")

    def process_keypress(self) -> CommandResult:
        return self.handle_key(self.surface.read_next_key())

    def handle_key(self, key: KeyInput) -> CommandResult:
        match: Optional[ResolutionMatch] = None
        if not key.key:
            result = CommandResult(consumed=False, status="ignored")
        else:
            token = KeyStroke(key.key, key.modifiers).token
            with telemetry.span(
                "editor::key", component="editor", metadata={"key": token}
            ):
                resolution = self.keymap_resolver.resolve(token)
                if resolution.status == "match" and resolution.match:
                    match = resolution.match
                    result = self._execute_match(match)
                else:
                    result = self._insert_text(key)

        if match is None or match.action.id != QUIT_ACTION:
            self.context.reset_quit_times()
        if result.quit:
            self.should_quit = True
        self.scroll()
        return result

    def _execute_match(self, match: ResolutionMatch) -> CommandResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={
                "binding_id": match.binding.id,
                "action": match.action.telemetry_name,
            },
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, CommandResult):
            return outcome
        return CommandResult(consumed=True)

    def _insert_text(self, key: KeyInput) -> CommandResult:
        text = printable_text(key)
        if text is None:
            return CommandResult(consumed=False, status="ignored")
        return core_actions.insert_char(self.context, text)

    def text_area_size(self) -> Tuple[int, int]:
        width, height = self.surface.query_viewport_size()
        return render.text_area_size(width, height)

    def scroll(self) -> None:
        width, height = self.text_area_size()
        self.view.scroll(width=width, height=height, buffer=self.buffer)

    def set_status_message(self, text: str) -> None:
        self._status = StatusMessage.now(text, clock=self._clock)

    def prompt(self, text: str) -> Optional[str]:
        """Blocking mini-loop collecting one line on the status line."""

        prompt = Prompt(text)
        while True:
            self.set_status_message(prompt.status_line)
            self.refresh_screen()
            outcome = prompt.handle_key(self.surface.read_next_key())
            if outcome.done:
                self.set_status_message("")
                return outcome.value

    def refresh_screen(self) -> None:
        if self.should_quit:
            render.draw_goodbye(self.surface)
            return
        width, height = self.surface.query_viewport_size()
        frame = render.compose_frame(
            self.buffer,
            self.view,
            width=width,
            height=height,
            version=__version__,
            message=self.status_text,
        )
        render.draw_frame(self.surface, frame, self.config)


__all__ = ["Editor", "HELP_MESSAGE"]
