"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_COOKIE_SECRET_KEY = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "zipline"

    # Session cookie
    cookie_name: str = "zipline"
    cookie_path: str = "/"
    cookie_secure: bool = False
    cookie_secret_key: str = DEFAULT_COOKIE_SECRET_KEY
    cookie_algorithm: str = "HS256"

    # Per-account session token (rotated by /reset-token)
    session_token_bytes: int = 32

    # When enabled, only a logged-in administrator may create accounts
    require_admin_for_create: bool = False

    # Logging
    log_level: str = "INFO"

    @property
    def uses_default_cookie_secret(self) -> bool:
        """True while cookies are signed with the public placeholder key."""
        return self.cookie_secret_key == DEFAULT_COOKIE_SECRET_KEY


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
