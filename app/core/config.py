from functools import lru_cache
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Rail Fence Cipher"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Cipher settings
    max_text_length: int = 100_000
    random_key_min_rails: int = 2
    random_key_max_rails: int = 10
    max_fence_rails: int = 1_000

    @model_validator(mode="after")
    def _check_random_key_range(self) -> "Settings":
        if not 1 <= self.random_key_min_rails <= self.random_key_max_rails:
            raise ValueError("random_key_min_rails must be >= 1 and <= random_key_max_rails")
        return self

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
