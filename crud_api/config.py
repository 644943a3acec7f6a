"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The shared secret comes from the environment (API_KEY); the default is a
      development key only
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box for local runs
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Auth
    api_key: str = "dev-key"
    api_key_header: str = "X-API-KEY"
    # Segment prefixes served without the key (docs and liveness)
    auth_bypass_prefixes: list[str] = [
        "/docs", "/redoc", "/openapi.json", "/health",
    ]

    # Store
    seed_users: bool = True

    # API
    docs_enabled: bool = True
    cors_origins: list[str] = ["http://localhost:5173"]
    host: str = "127.0.0.1"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("auth_bypass_prefixes")
    @classmethod
    def normalize_prefixes(cls, v: list[str]) -> list[str]:
        """'/docs/' and 'docs' both become '/docs'."""
        return ["/" + p.strip().strip("/") for p in v if p.strip().strip("/")]


@lru_cache
def get_settings() -> Settings:
    return Settings()
