"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


# Storage calls are logged at debug level, so only development shows them
LOG_LEVELS = {
    "development": logging.DEBUG,
    "production": logging.INFO,
    "test": logging.WARNING,
}


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite:///./flashdeck.db"
    USE_IN_MEMORY_STORAGE: bool = False

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "flashdeck API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Server
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 5000

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def strip_database_url(cls, value: str) -> str:
        """Strip whitespace from the database URL."""
        return value.strip()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_test_database(self) -> bool:
        """Whether the configured database is a throwaway test database (name ends in _test)."""
        database = make_url(self.DATABASE_URL).database or ""
        return database.endswith("_test")


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=LOG_LEVELS.get(environment, logging.INFO),
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
