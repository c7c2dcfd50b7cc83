"""Application configuration.

Values are read from ``FITLOG_*`` environment variables or a ``.env`` file.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="FITLOG_", env_file=".env", extra="ignore")

    # Storage
    data_dir: Path = Path("data")
    db_filename: str = "fitlog.db"
    storage_backend: Literal["sqlite", "memory"] = "sqlite"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Plan spreadsheet uploads
    max_upload_bytes: int = 10 * 1024 * 1024


settings = Settings()
