"""Centralized configuration for search-server using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every field can be overridden with a ``SEARCH_SERVER_`` prefixed
    environment variable (``SEARCH_SERVER_MAX_RESULT_DOCUMENT_COUNT=10``) or
    from a local ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Ranking
    max_result_document_count: int = Field(
        default=5, ge=1, description="Maximum number of documents returned by a top-documents query"
    )
    relevance_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        description="Relevance values closer than this are treated as equal and ordered by rating",
    )

    # Analysis
    stop_words: str = Field(default="", description="Space-delimited stop words registered at startup")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}'. Available: {sorted(_LOG_LEVELS)}")
        return normalized

    def get_stop_words(self) -> list[str]:
        """Get the configured stop words as a list."""
        return [word for word in self.stop_words.split(" ") if word]
