"""Configuration management for the template lexer."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LexerSettings(BaseSettings):
    """Settings read from the environment."""

    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    # Max compressed tokens held between a stream's writer and its reader
    stream_high_water_mark: int = Field(
        default=16,
        ge=1,
        alias="TEMPLATE_LEXER_STREAM_HIGH_WATER_MARK",
    )


@lru_cache()
def get_settings() -> LexerSettings:
    """Get cached settings instance."""
    return LexerSettings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the environment is read again."""
    get_settings.cache_clear()
