"""Editor configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "RTT_"

TAB_STOP = 8
QUIT_TIMES = 3
STATUS_TIMEOUT = 5.0

# Reserved screen rows below the text area: status bar + message bar.
RESERVED_ROWS = 2


@dataclass
class EditorConfig:
    """Tunables for rendering and the quit/status protocols."""

    tab_stop: int = TAB_STOP
    quit_times: int = QUIT_TIMES
    status_timeout: float = STATUS_TIMEOUT
    encoding: str = "utf-8"
    status_foreground: str = "rgb(63,63,63)"
    status_background: str = "rgb(239,239,239)"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            tab_stop=_positive_int(env, "TAB_STOP", defaults.tab_stop),
            quit_times=_positive_int(env, "QUIT_TIMES", defaults.quit_times),
            status_timeout=_positive_float(
                env, "STATUS_TIMEOUT", defaults.status_timeout
            ),
            encoding=env.get(f"{ENV_PREFIX}ENCODING") or defaults.encoding,
        )


def _positive_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def _positive_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


__all__ = ["EditorConfig", "RESERVED_ROWS", "TAB_STOP", "QUIT_TIMES", "STATUS_TIMEOUT"]
