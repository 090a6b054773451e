"""Runtime settings.

Read from STALEMATE_* environment variables or a .env.stalemate file.
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STALEMATE_", env_file=".env.stalemate", env_file_encoding="utf-8",
    )

    # The search is exponential in the piece count
    max_pieces: int = 11
    # Upper bound for random fixture generation
    generate_max: int = 10

    log_level: LogLevel = "WARNING"

    # Exit non-zero from the CLI when the greedy search finds no stalemate
    strict: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
