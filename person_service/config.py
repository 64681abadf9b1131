"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - resource_prefix always starts with "/" and never ends with one

Design Decisions:
    - Defaults provided for every setting: the service runs with no environment at all
    - trusted_user_header unset disables identity pass-through entirely
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # API
    service_name: str = "person-service"
    version: str = "1.0.0"
    resource_prefix: str = "/resource"
    cors_origins: list[str] = ["http://localhost:8080"]

    # Header carrying a caller identity already resolved by a fronting proxy
    trusted_user_header: str | None = None

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("resource_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = "/" + v.strip().strip("/")
        if v == "/":
            raise ValueError("resource_prefix cannot be the root path")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
