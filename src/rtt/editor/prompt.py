"""Single-line input collector used by the blocking prompt loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .base import KeyInput
from .keys import is_backspace, is_enter, is_escape, printable_text


@dataclass(slots=True)
class PromptOutcome:
    """What a key did to the prompt: keep editing, or finish with a value."""

    done: bool
    value: Optional[str] = None
    status: str = "editing"


class Prompt:
    """Accumulates typed characters until Enter or Escape."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._typed: List[str] = []

    @property
    def current_input(self) -> str:
        return "".join(self._typed)

    @property
    def status_line(self) -> str:
        return f"{self.text}{self.current_input}"

    def handle_key(self, key: KeyInput) -> PromptOutcome:
        if is_escape(key):
            self._typed.clear()
            return PromptOutcome(done=True, status="prompt_cancel")

        if is_enter(key):
            value = self.current_input or None
            self._typed.clear()
            return PromptOutcome(done=True, value=value, status="prompt_submit")

        if is_backspace(key):
            if self._typed:
                self._typed.pop()
            return PromptOutcome(done=False)

        text = printable_text(key, allow_tab=False)
        if text is not None:
            self._typed.append(text)
            return PromptOutcome(done=False)

        return PromptOutcome(done=False, status="ignored")


__all__ = ["Prompt", "PromptOutcome"]
