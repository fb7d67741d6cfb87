"""
Runtime configuration, read from environment variables.

CHECKERS_DATABASE_URL     SQLAlchemy URL of the store (default: sqlite:///checkers.db)
CHECKERS_LOG_LEVEL        standard logging level name (default: INFO)
CHECKERS_MULTI_JUMP       "1" to let a piece that just captured keep the turn while it can capture again (default: 0)
CHECKERS_FORCED_CAPTURE   "1" to make captures mandatory (default: 0)
CHECKERS_WIN_CONDITION    "no_pieces" or "no_moves" (default: no_pieces)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Self

from src.checkers.rules import WIN_CONDITIONS, RulesConfig
from src.core.exceptions import ConfigurationError
from src.core.shared_types import WinCondition

DEFAULT_DATABASE_URL = "sqlite:///checkers.db"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

TRUTHY = {"1", "true", "yes", "on"}


def _flag(value: str) -> bool:
    return value.strip().lower() in TRUTHY


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    continue_multi_jump: bool = False
    forced_capture: bool = False
    win_condition: WinCondition = WinCondition.NO_PIECES

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        env = os.environ if environ is None else environ

        win_condition = env.get("CHECKERS_WIN_CONDITION", WinCondition.NO_PIECES.value)
        if win_condition not in WinCondition.__members__.values():
            raise ConfigurationError(
                f"Unknown win condition {win_condition!r}. Pick one from {','.join(c.value for c in WinCondition)}"
            )

        return cls(
            database_url=env.get("CHECKERS_DATABASE_URL", DEFAULT_DATABASE_URL),
            log_level=env.get("CHECKERS_LOG_LEVEL", "INFO").upper(),
            continue_multi_jump=_flag(env.get("CHECKERS_MULTI_JUMP", "0")),
            forced_capture=_flag(env.get("CHECKERS_FORCED_CAPTURE", "0")),
            win_condition=WinCondition(win_condition),
        )

    def rules_config(self) -> RulesConfig:
        return RulesConfig(
            continue_multi_jump=self.continue_multi_jump,
            forced_capture=self.forced_capture,
            win_condition=WIN_CONDITIONS[self.win_condition],
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
