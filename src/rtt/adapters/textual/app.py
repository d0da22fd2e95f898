"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from rtt import __version__
from rtt.config import EditorConfig
from rtt.editor.controller import Editor
from rtt.runtime import telemetry
from rtt.runtime.telemetry import PRESET_LOG_FILES

from .surface import SurfaceHooks, TextualSurface, normalize_key


class EditorApp(App[None], inherit_bindings=False):
    """Full-screen Textual UI whose only widget is the editor's screen grid.

    Built-in bindings are not inherited so Ctrl-Q, Ctrl-S and friends reach
    the editor's own keymap.
    """

    ENABLE_COMMAND_PALETTE = False

    CSS = """
	Screen {
		layout: vertical;
		overflow: hidden;
	}

	#screen-grid {
		width: 1fr;
		height: 1fr;
		padding: 0;
	}
	"""

    def __init__(
        self,
        path: Optional[str] = None,
        *,
        config: Optional[EditorConfig] = None,
    ) -> None:
        super().__init__()
        self._path = path
        self._config = config or EditorConfig.from_env()
        self._grid: Static | None = None
        self.logger = telemetry.get_logger("rtt.adapters.textual")
        self.surface = TextualSurface(
            SurfaceHooks(
                viewport_size=self._viewport_size,
                publish=self._publish,
                log=self._log_line,
            )
        )
        self.editor: Editor | None = None

    def compose(self) -> ComposeResult:
        self._grid = Static("", id="screen-grid")
        yield self._grid

    def on_mount(self) -> None:
        self.editor = Editor.open(self.surface, self._path, config=self._config)
        self.run_worker(self._run_editor, thread=True, exclusive=True, name="editor")

    def on_unmount(self) -> None:
        self.surface.close()

    async def on_key(self, event: events.Key) -> None:
        key = normalize_key(event.key, event.character, is_printable=event.is_printable)
        if key is None:
            return
        event.prevent_default()
        event.stop()
        self.surface.push_key(key)

    def _run_editor(self) -> None:
        """Worker body: the editor loop owns this thread until quit."""

        assert self.editor is not None
        self.editor.run()
        if not self.surface.closed:
            self.call_from_thread(self.exit)

    def _viewport_size(self) -> Tuple[int, int]:
        size = self.size
        return size.width, size.height

    def _publish(self, frame: Text) -> None:
        if self.surface.closed:
            return
        self.call_from_thread(self._show_frame, frame)

    def _show_frame(self, frame: Text) -> None:
        if self._grid is not None:
            self._grid.update(frame)

    def _log_line(self, line: str) -> None:
        self.logger.debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rtt", description="Edit a plain-text file in the terminal."
    )
    parser.add_argument("path", nargs="?", help="File to open (omit for a new buffer)")
    parser.add_argument(
        "--log-preset",
        choices=sorted(PRESET_LOG_FILES),
        help="Named telemetry preset (logs go to a file, never the terminal)",
    )
    parser.add_argument("--log-file", help="Write telemetry to this file")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset or args.log_file:
        telemetry.configure(preset=args.log_preset, log_file=args.log_file)
    app = EditorApp(args.path)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
