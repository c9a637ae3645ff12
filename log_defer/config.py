"""Package configuration helpers."""

from functools import lru_cache
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import resolve_level


class Settings(BaseSettings):
    """Runtime settings sourced from ``LOG_DEFER_*`` environment variables."""

    level: Union[int, str] = Field(
        default="info",
        description="Default severity threshold for sessions created without a level",
    )
    logger_name: str = Field(
        default="log_defer.records",
        description="Logger used by LoggingSink when none is passed explicitly",
    )
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII characters in JSON sinks")

    model_config = SettingsConfigDict(
        env_prefix="LOG_DEFER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("level")
    @classmethod
    def ensure_known_level(cls, value: Union[int, str]) -> Union[int, str]:
        """Reject thresholds that sessions would refuse later."""

        resolve_level(value)
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
