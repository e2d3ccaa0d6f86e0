"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API (constants, not from env)
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "wordroots API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Flat-file content store
    DATA_DIR: Path = DEFAULT_DATA_DIR

    # Vocabulary generation webhook (n8n style). Unset disables AI generation.
    VOCAB_WEBHOOK_URL: str | None = None
    VOCAB_WEBHOOK_TIMEOUT_SECONDS: float = 60.0

    # Seed for quiz and suggestion shuffling; None means nondeterministic
    RANDOM_SEED: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def webhook_enabled(self) -> bool:
        """Whether the vocabulary webhook is configured."""
        return self.VOCAB_WEBHOOK_URL is not None

    @field_validator("VOCAB_WEBHOOK_URL", mode="after")
    @classmethod
    def blank_webhook_url_is_none(cls, value: str | None) -> str | None:
        """Treat a blank webhook URL as not configured."""
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("VOCAB_WEBHOOK_TIMEOUT_SECONDS", mode="after")
    @classmethod
    def timeout_must_be_positive(cls, value: float) -> float:
        """Reject a zero or negative webhook timeout."""
        if value <= 0:
            msg = "VOCAB_WEBHOOK_TIMEOUT_SECONDS must be positive"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )
    # httpx logs every webhook request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: one JSON object per line
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: readable console output
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
