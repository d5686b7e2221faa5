"""Settings from environment variables (prefix ``ASLA_``) and logging setup."""

import logging
from functools import lru_cache

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ASLA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gemini_api_key: str = Field(default="", description="Gemini API key")
    gemini_model: str = Field(default="gemini-1.5-flash")
    provider_timeout: float = Field(
        default=20.0,
        gt=0,
        description="Seconds to wait for a suggestion or advice",
    )
    recent_limit: int = Field(default=5, ge=1)
    log_level: str = Field(default="INFO")
    log_json: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None, json: bool | None = None):
    """Route structlog through stdlib logging at the configured level."""
    settings = get_settings()
    level = (level or settings.log_level).upper()
    json = settings.log_json if json is None else json
    logging.basicConfig(format="%(message)s", level=level)
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
