"""Runtime configuration.

Environment first, then command-line flags on top. Nothing is persisted.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str) -> bool:
    v = os.getenv(name, "")
    return v.strip() not in ("", "0")


@dataclass
class GameConfig:
    clear_screen: bool = True
    verbose: bool = False
    start_board: Optional[str] = None

    @classmethod
    def from_env(cls) -> "GameConfig":
        return cls(clear_screen=not _env_flag("TTTGAME_NO_CLEAR"))
