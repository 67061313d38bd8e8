"""Configuration settings for the team balancer service."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PLACEHOLDER_API_KEYS = ("", "dev_api_key", "your_riot_api_key_here")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Riot API Configuration
    riot_api_key: str = Field(default="dev_api_key")
    riot_region: str = Field(default="asia", description="Regional routing (match-v5, account-v1)")
    riot_platform: str = Field(default="jp1", description="Platform routing (summoner-v4, league-v4)")

    # Upstream protection
    cache_maxsize: int = Field(default=1000, ge=1)
    cache_ttl_seconds: float = Field(default=3600, gt=0)
    rate_limit_interval_seconds: float = Field(
        default=0.07, ge=0, description="Minimum spacing between upstream call starts"
    )

    # Role inference
    role_sample_size: int = Field(default=15, ge=1, le=100)

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    port: int = Field(default=3000)

    @field_validator("riot_region", "riot_platform")
    @classmethod
    def lower_routing(cls, v: str) -> str:
        """Routing values are host prefixes and always lower-case."""
        return v.strip().lower()

    @property
    def has_api_key(self) -> bool:
        """Whether a real (non-placeholder) API key is configured."""
        return self.riot_api_key.strip() not in PLACEHOLDER_API_KEYS

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
