"""Classifying ``KeyInput`` events for text entry and the prompt."""

from __future__ import annotations

from typing import Optional

from .base import KeyInput

ENTER_KEYS = frozenset({"ENTER", "RETURN"})
ESCAPE_KEYS = frozenset({"ESC", "ESCAPE", "<Esc>"})
BACKSPACE_KEYS = frozenset({"BACKSPACE"})
TAB = "\t"


def printable_text(key: KeyInput, *, allow_tab: bool = True) -> Optional[str]:
    """Return the single character a key would type, or ``None``.

    Control characters never count; Tab does when ``allow_tab`` is set.
    """

    if key.ctrl:
        return None
    if key.key == "TAB":
        return TAB if allow_tab else None
    text = key.text
    if not text or len(text) != 1:
        return None
    if text == TAB:
        return TAB if allow_tab else None
    if not text.isprintable():
        return None
    return text


def is_enter(key: KeyInput) -> bool:
    return key.key in ENTER_KEYS and not key.modifiers


def is_escape(key: KeyInput) -> bool:
    return key.key in ESCAPE_KEYS


def is_backspace(key: KeyInput) -> bool:
    if key.key in BACKSPACE_KEYS:
        return True
    return key.ctrl and key.key.lower() == "h"


__all__ = [
    "printable_text",
    "is_enter",
    "is_escape",
    "is_backspace",
]
