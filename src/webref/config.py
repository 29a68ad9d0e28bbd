"""Configuration for webref, read from the environment and ``.env``."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvConfig(BaseSettings):
    """Environment variable configuration using pydantic-settings."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='allow'
    )

    # Logging
    WEBREF_LOGGING_LEVEL: str = Field(default='info')
    WEBREF_DEBUG_LOG_FILE: str | None = Field(default=None)

    # References
    WEBREF_DEFAULT_REFERENCE_KIND: str = Field(default='element')


class Config:
    """Configuration class backed by the environment.

    Re-reads environment variables on every access so tests and long-lived
    processes pick up changes.
    """

    _instance: 'Config | None' = None

    def __new__(cls) -> 'Config':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def LOGGING_LEVEL(self) -> str:
        return EnvConfig().WEBREF_LOGGING_LEVEL.lower()

    @property
    def DEBUG_LOG_FILE(self) -> Path | None:
        path = EnvConfig().WEBREF_DEBUG_LOG_FILE
        if not path:
            return None
        return Path(path).expanduser()

    @property
    def DEFAULT_REFERENCE_KIND(self) -> str:
        return EnvConfig().WEBREF_DEFAULT_REFERENCE_KIND.lower()


# Create singleton instance
CONFIG = Config()
