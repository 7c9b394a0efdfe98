"""Application configuration loaded from environment and .env file."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


def find_project_root() -> Path:
    """Return the nearest ancestor directory that contains a .env file.

    Starts at the directory of this file and walks up to the filesystem root.
    Falls back to two levels above this file if no .env is found.
    """
    current_dir = Path(__file__).parent
    while current_dir != current_dir.parent:
        if (current_dir / ".env").exists():
            return current_dir
        current_dir = current_dir.parent
    return Path(__file__).parent.parent.parent


# Pre-load .env so code reading os.environ directly sees the same values
PROJECT_ROOT: Path = find_project_root()
load_dotenv(PROJECT_ROOT / ".env")


class Settings(BaseSettings):
    """Strongly-typed application settings loaded from environment and .env."""

    # Database
    DATABASE_URL: str = "sqlite:///./taskhub.sqlite"
    SQL_ECHO: bool = False

    # Password hashing (bcrypt cost factor)
    BCRYPT_ROUNDS: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Singleton settings instance
settings = Settings()
