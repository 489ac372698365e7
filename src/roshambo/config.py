"""Lightweight configuration for the Roshambo demo."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from roshambo.domain.enums import Choice

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings for the demonstration round.

    Only ``ROSHAMBO_*`` environment variables are read; no ``.env`` file is
    loaded, so an empty environment always plays John/Rock against
    Jeff/Scissors.
    """

    model_config = SettingsConfigDict(env_prefix="ROSHAMBO_")

    player_one_name: str = Field(default="John", min_length=1, description="First player")
    player_one_choice: Choice = Field(default=Choice.ROCK, description="First player's sign")
    player_two_name: str = Field(default="Jeff", min_length=1, description="Second player")
    player_two_choice: Choice = Field(
        default=Choice.SCISSORS, description="Second player's sign"
    )
    log_level: LogLevel = Field(default="WARNING", description="Root logging level (stderr)")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
