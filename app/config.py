"""Application settings loaded from environment variables / .env."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackend(str, Enum):
    MEMORY = "memory"
    LOCAL = "local"
    SQL = "sql"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = Field(default="ShelfWise")
    log_level: str = Field(default="INFO")

    # Key-value store
    storage_backend: StorageBackend = Field(default=StorageBackend.LOCAL)
    storage_dir: str = Field(default="./data")
    database_url: str = Field(default="sqlite+aiosqlite:///./shelfwise.db")

    # Circulation / recommendations
    loan_period_days: int = Field(default=7, ge=1)
    recommendation_limit: int = Field(default=5, ge=1)


settings = Settings()
