"""
Configuration - Engine settings, environment loading and logging setup.

Environment variables:
- CARDTABLE_SEED: integer seed for deterministic shuffles (unset = random)
- CARDTABLE_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR (default WARNING)
"""

from __future__ import annotations
import logging
import os
import random
import sys
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: Optional[logging.Handler] = None


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class EngineConfig(BaseModel):
    """Settings shared by every engine built through create_game()."""
    seed: Optional[int] = Field(None, description="Seed for the shuffle rng; None for an unseeded one")
    log_level: LogLevel = LogLevel.WARNING

    @classmethod
    def from_env(cls) -> EngineConfig:
        seed = os.getenv("CARDTABLE_SEED")
        return cls(
            seed=int(seed) if seed else None,
            log_level=os.getenv("CARDTABLE_LOG_LEVEL", "WARNING").upper(),
        )

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


def configure_logging(config: EngineConfig | None = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Safe to call more than once: the handler is added only the first time,
    later calls just update the level.
    """
    config = config or EngineConfig.from_env()
    logger = logging.getLogger("cardtable")
    logger.setLevel(config.log_level.value)

    global _console_handler
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_console_handler)

    return logger
