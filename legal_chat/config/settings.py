"""Configuration management for the legal chat assistant."""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.domain.exceptions import InvalidConfigurationError


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Keys pasted from some editors carry a BOM that breaks HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Google AI API
    google_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GOOGLE_API_KEY", "GEMINI_API_KEY"),
    )

    @field_validator("google_api_key", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Model settings
    llm_model: str = "gemini-2.5-flash"
    # Low temperature for factual answers
    llm_temperature: float = Field(default=0.1, ge=0.0, le=2.0)

    # Data directories
    data_dir: Path = Path("./data")

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Path | None = None

    @property
    def documents_db_path(self) -> Path:
        """SQLite file holding the persisted document library."""
        return self.data_dir / "documents.db"

    def ensure_directories(self) -> None:
        """Create the data directory if it doesn't exist.

        Raises:
            InvalidConfigurationError: If ``data_dir`` points at a file.
        """
        if self.data_dir.exists() and not self.data_dir.is_dir():
            raise InvalidConfigurationError(
                f"DATA_DIR is not a directory: {self.data_dir}",
                context={"data_dir": str(self.data_dir)},
            )
        self.data_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
