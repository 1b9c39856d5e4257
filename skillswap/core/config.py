"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables.
"""
from functools import lru_cache
from typing import List, Optional

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
    app_name: str = "SkillSwap"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Remote actor gateway
    actor_url: str = "http://localhost:4943/actor"
    actor_timeout_seconds: float = 10.0
    actor_api_key: Optional[str] = None

    # Identity resolved upstream by the identity provider
    principal_header: str = "X-Principal"

    # Query cache
    query_stale_seconds: int = 300  # 5 min staleness window

    # Views
    directory_page_size: int = 100
    dashboard_match_limit: int = 6
    card_skill_preview: int = 3
    display_timezone: str = "Asia/Kolkata"

    @model_validator(mode="after")
    def _require_actor_key_outside_development(self) -> "Settings":
        """Fail loud if staging/production has no credential for the actor gateway."""
        if self.environment in ("production", "staging") and not self.actor_api_key:
            raise ValueError(
                f"SECURITY: 'actor_api_key' must be set via environment variable in {self.environment}."
            )
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
