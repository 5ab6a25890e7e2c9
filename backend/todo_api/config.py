"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - mail_api_url must be set when mail_backend is "http"

Design Decisions:
    - Defaults provided for all non-secret settings: runs out-of-the-box with
      the log-only mail backend
    - The router receives settings only through the TodoRest handle
"""

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from todo_api.core.domain_types import MailBackend

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API
    app_name: str = "Todo API"
    base_url: str = "http://localhost:8000"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Mail
    mail_backend: MailBackend = MailBackend.LOG
    mail_api_url: str = ""
    mail_api_key: str = "mail-key-placeholder"
    mail_sender: str = "todo@localhost"
    mail_timeout_seconds: int = 10

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return upper

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return lower

    @model_validator(mode="after")
    def require_mail_api_url(self) -> "Settings":
        if self.mail_backend == MailBackend.HTTP and not self.mail_api_url:
            raise ValueError("MAIL_API_URL must be set when mail_backend=http")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
