"""Environment driven settings for the acceptlang service."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .language import parse_preferences

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    supported_languages: str = Field(
        default="en-US,fr-CA,fr-FR",
        description="Comma-separated language tags the service can serve, most preferred first",
    )
    log_level: str = Field(default="INFO", description="Name of a standard logging level")

    model_config = SettingsConfigDict(env_prefix="ACCEPTLANG_", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def supported_tags(self) -> List[str]:
        return parse_preferences(self.supported_languages)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
