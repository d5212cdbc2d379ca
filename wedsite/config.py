from typing import Optional

from dotenv import load_dotenv
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Wedding Site Platform"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    app_url: str = "http://localhost:5000"
    host: str = "0.0.0.0"
    port: int = 5000

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./wedsite.db"

    # Security settings
    secret_key: str = "change-me-in-production"
    access_token_expire_minutes: int = 60 * 24 * 7

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:5000", "http://localhost:5173"]

    # Internationalization
    supported_languages: list[str] = ["en", "hy", "ru"]
    default_language: str = "en"
    translation_poll_interval: float = 2.0
    translation_ready_timeout: float = 5.0
    sse_keepalive_interval: float = 15.0

    # Rate limiting
    rate_limit_storage_uri: str = "memory://"
    rate_limit_dev_bypass: bool = False

    # RSVP
    rsvp_default_max_guests: int = 10

    # Composer cache
    config_cache_size: int = 512

    # Email settings (notifications are skipped when smtp_host is unset)
    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_from: str = "noreply@wedding-platform.com"
    smtp_use_tls: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @model_validator(mode="after")
    def check_production_guards(self) -> "Settings":
        if self.is_production and self.rate_limit_dev_bypass:
            raise ValueError("rate_limit_dev_bypass cannot be enabled in production")
        if self.default_language not in self.supported_languages:
            raise ValueError(
                f"default_language '{self.default_language}' is not in supported_languages"
            )
        return self


settings = Settings()
