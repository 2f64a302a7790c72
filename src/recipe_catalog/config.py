"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from recipe_catalog.app_logging import DEFAULT_FORMAT

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_schema: str = "public"
    recipes_table: str = "recipes"
    recipe_password: str
    host: str = "0.0.0.0"
    port: int = 8000
    forwarded_allow_ips: str = "*"
    log_level: str = "INFO"
    log_format: str = DEFAULT_FORMAT
    reload_interval_seconds: float = 30.0
    unauthorized_delay_seconds: float = 1.0
    rate_limit_window_seconds: float = 15 * 60
    rate_limit_delay_after: int = 100
    rate_limit_delay_ms: int = 500
    resave_on_startup: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
