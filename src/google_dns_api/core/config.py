"""Centralized configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://dns.google.com/resolve"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GOOGLE_DNS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream resolver
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = Field(default=5.0, gt=0)
    user_agent: str = "google-dns-api/1.0"

    # Pad every request URL to this length with random_padding (off when unset)
    pad_to_length: Optional[int] = Field(default=None, gt=0)

    # HTTP server (python -m google_dns_api)
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "warning"

    # Sentry configuration (optional)
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 1.0

    @property
    def auto_padding(self) -> bool:
        """Check if automatic request padding is enabled."""
        return self.pad_to_length is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
