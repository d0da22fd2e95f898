"""Transient status-line message."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from rtt.config import STATUS_TIMEOUT

Clock = Callable[[], float]


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    created: float = field(default_factory=time.monotonic)

    @classmethod
    def now(cls, text: str, *, clock: Clock = time.monotonic) -> "StatusMessage":
        return cls(text=text, created=clock())

    def age(self, *, clock: Clock = time.monotonic) -> float:
        return clock() - self.created

    def visible(
        self, *, timeout: float = STATUS_TIMEOUT, clock: Clock = time.monotonic
    ) -> Optional[str]:
        """The text while it is younger than ``timeout`` seconds, else ``None``."""

        if self.text and self.age(clock=clock) < timeout:
            return self.text
        return None


__all__ = ["StatusMessage", "Clock"]
