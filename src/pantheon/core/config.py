from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SSL_MODES = ("disable", "prefer", "require", "verify-ca", "verify-full")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Pantheon"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Privacy
    log_volunteer_emails: bool = False  # Keep False in production

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_pool_timeout: int = 10  # Seconds to wait for a pooled connection
    database_command_timeout: int = 30  # Per-statement timeout in seconds
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full

    # Workspace export
    workspace_org_unit: str = "/Programs/PantheonUsers"

    @field_validator("database_ssl_mode")
    @classmethod
    def validate_ssl_mode(cls, v: str) -> str:
        if v not in SSL_MODES:
            raise ValueError(f"DATABASE_SSL_MODE must be one of {', '.join(SSL_MODES)}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
