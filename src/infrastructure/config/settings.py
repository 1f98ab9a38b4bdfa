from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Codex session history
    codex_sessions_dir: Path = Field(
        default=Path.home() / ".codex" / "sessions",
        validation_alias="CODEX_SESSIONS_DIR",
    )
    session_title_max_length: int = Field(
        default=45, ge=1, validation_alias="SESSION_TITLE_MAX_LENGTH"
    )

    # Path references
    path_reference_include_project_name: bool = Field(
        default=True, validation_alias="PATH_REFERENCE_INCLUDE_PROJECT_NAME"
    )
    clipboard_enabled: bool = Field(default=True, validation_alias="CLIPBOARD_ENABLED")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )

    # Server
    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("codex_sessions_dir")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
