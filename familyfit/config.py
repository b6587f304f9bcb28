from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # APP
    APP_NAME: str = "Family Fitness"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Scoring (default weekly target for roster members that omit one)
    DEFAULT_WEEKLY_TARGET_HOURS: float = 7.0

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def expose_docs(self) -> bool:
        """OpenAPI docs are only served outside production."""
        return self.ENVIRONMENT in ("local", "staging")


@lru_cache()
def get_settings() -> Settings:
    """Cached settings only loads once"""
    return Settings()
