"""Application configuration using Pydantic settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maze_game.core.maze_parser import CellType

# Package root directory (maze_game/)
BASE_DIR = Path(__file__).resolve().parent

# Bundled sample mazes
MAZES_DIR = BASE_DIR / "mazes"


class Settings(BaseSettings):
    """Application settings loaded from MAZE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAZE_",
        env_file=os.path.join(BASE_DIR.parent, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Maze Game"
    log_level: str = "WARNING"

    # Game
    marker: str = "X"
    prompt: str = "Enter a direction: "
    default_maze: Optional[Path] = None

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """The marker must be one character and distinct from every maze symbol."""
        if len(v) != 1:
            raise ValueError("MARKER must be a single character")
        if CellType.from_char(v) is not None:
            raise ValueError(f"MARKER {v!r} collides with a maze symbol")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
