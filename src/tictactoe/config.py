"""Application settings resolved from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from tictactoe.constants import UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class AppConfig:
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    window_title: str = WINDOW_TITLE
    update_rate: float = UPDATE_RATE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build a config from ``TICTACTOE_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        level = env.get("TICTACTOE_LOG_LEVEL", "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            level = "INFO"
        return cls(
            window_width=_positive_int(env.get("TICTACTOE_WINDOW_WIDTH"), WINDOW_WIDTH),
            window_height=_positive_int(env.get("TICTACTOE_WINDOW_HEIGHT"), WINDOW_HEIGHT),
            window_title=env.get("TICTACTOE_WINDOW_TITLE", WINDOW_TITLE) or WINDOW_TITLE,
            update_rate=_positive_float(env.get("TICTACTOE_UPDATE_RATE"), UPDATE_RATE),
            log_level=level,
        )


def _positive_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _positive_float(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0.0 else default
