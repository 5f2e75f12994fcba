"""Settings and logging setup."""

import logging
import sys
from functools import lru_cache
from typing import Literal

import structlog
from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.typing import Processor

from quizprogress.domain.progress.value_objects import DEFAULT_MAX_EXPERIENCE

Environment = Literal["development", "production", "test"]


class Settings(BaseSettings):
    """Read from the process environment, then `.env`."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite:///./quizprogress.db"
    ENVIRONMENT: Environment = "development"
    CORS_ORIGINS: list[str] = ["*"]

    # Highest experience total a user can reach
    MAX_EXPERIENCE_CAP: PositiveInt = DEFAULT_MAX_EXPERIENCE

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "quizprogress API"
    VERSION: str = "0.1.0"


def configure_logging(environment: Environment = "development") -> None:
    """
    Send stdlib and structlog output to stdout.

    Production renders one JSON object per event; other environments use the
    human-friendly console renderer and also emit debug events in development.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
