"""Load environment config."""

from __future__ import annotations

import logging
import os

import dotenv


class Config:
    """Load environement variables as class."""

    def __init__(self: Config) -> None:
        """Load environement variables as class."""
        dotenv.load_dotenv()

        env = os.environ

        self.SECRET: str = env.get("DISCORD_SECRET") or ""
        self.VERSION: str = env.get("VERSION") or "1.0.0"

        self.DEFAULT_HP_THRESHOLD: str = env.get("DEFAULT_HP_THRESHOLD") or "80"
        self.DEFAULT_LOW_HP: str = env.get("DEFAULT_LOW_HP") or "7"
        self.DEFAULT_HIGH_HP: str = env.get("DEFAULT_HIGH_HP") or "5"

        level = logging.getLevelName((env.get("LOG_LEVEL") or "INFO").upper())
        self.LOG_LEVEL: int = level if isinstance(level, int) else logging.INFO


CONFIG = Config()
