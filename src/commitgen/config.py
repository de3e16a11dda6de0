# File: src/commitgen/config.py
# Purpose: Invocation config value object and pydantic-settings based app settings
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMEOUT_S = 30


@dataclass(frozen=True)
class InvocationConfig:
    enabled: bool
    command: str
    timeout_s: int = DEFAULT_TIMEOUT_S


class Settings(BaseSettings):
    """
    Application settings read from the environment and `.env`.

    The LLM command is run through the shell, so whoever can edit these
    values can run arbitrary commands as the current user. They must only
    come from the user's own environment or config files.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # LLM Command Configuration
    LLM_ENABLED: bool = False
    LLM_COMMAND: str = ""
    LLM_TIMEOUT_S: int = Field(default=DEFAULT_TIMEOUT_S, ge=1, le=600)

    # User-facing text
    LANGUAGE: Literal["en", "zh"] = "en"

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = ""
    LOG_JSON: bool = True

    def invocation_config(self) -> InvocationConfig:
        return InvocationConfig(
            enabled=self.LLM_ENABLED,
            command=self.LLM_COMMAND,
            timeout_s=self.LLM_TIMEOUT_S,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings singleton
    """
    return Settings()
