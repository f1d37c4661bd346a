from pathlib import Path
from typing import Final

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import VALID_LOG_LEVELS


class Settings(BaseSettings):
    """Library settings loaded from environment variables and .env files."""

    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging configuration
    log_level: str | None = Field(
        default=None, description="Log level override (defaults from debug mode)"
    )
    log_to_file: bool = Field(
        default=False, description="Also write log output to a file"
    )
    log_dir: Path = Field(
        default=Path("logs"), description="Directory for the log file"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Normalize the log level name and reject unknown levels."""
        if v is None or not v.strip():
            return None
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(VALID_LOG_LEVELS)}, got {v!r}"
            )
        return level

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_prefix="ROSTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def effective_log_level(self) -> str:
        """Get the log level to use, defaulting to DEBUG in debug mode."""
        if self.log_level:
            return self.log_level
        return "DEBUG" if self.debug else "INFO"


# Global settings instance
settings: Final = Settings()
