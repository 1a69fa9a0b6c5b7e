"""Runtime settings read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .models import NOTE_MAX_LEN

# Field limits for the entry form
NOTE_CHAR_LIMIT = NOTE_MAX_LEN
AMOUNT_CHAR_LIMIT = 32

# Rows the list view gives up to the header, form help and status line
HEADER_ROWS = 4
FOOTER_ROWS = 3
# Each list entry is drawn as a title line plus an amount line
ROWS_PER_ENTRY = 2
# Blank margin around the whole screen, in rows and columns
PADDING_Y = 1
PADDING_X = 2

THEMES = ("green", "mono")


@dataclass(frozen=True)
class Settings:
    log_file: Path | None = None
    log_level: str = "INFO"
    theme: str = "green"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from ``COINBOOK_*`` environment variables."""
        env = os.environ if environ is None else environ
        log_file = env.get("COINBOOK_LOG_FILE") or None
        theme = env.get("COINBOOK_THEME", "green").strip().lower()
        if theme not in THEMES:
            theme = "green"
        return cls(
            log_file=Path(log_file) if log_file else None,
            log_level=env.get("COINBOOK_LOG_LEVEL", "INFO"),
            theme=theme,
        )
