from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, PORT, HISTORY_CAPACITY, SCORE_MAX).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Global Wealth ID"
    debug: bool = False
    version: str = "0.1.0"

    # Serving
    host: str = "0.0.0.0"
    port: int = 3001
    cors_origins: List[str] = ["*"]

    # Conversion rules
    history_capacity: int = 10
    score_min: float = 0
    score_max: float = 1000

    def init_post_load(self) -> None:
        """Validate cross-field constraints."""
        if self.history_capacity < 1:
            raise ValueError(
                f"history_capacity must be at least 1, got {self.history_capacity}"
            )
        if self.score_min > self.score_max:
            raise ValueError(
                f"score_min ({self.score_min}) cannot exceed score_max ({self.score_max})"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
