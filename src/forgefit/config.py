"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory (project root /data)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file).

    Every field can be overridden with a ``FORGEFIT_`` prefixed variable,
    e.g. ``FORGEFIT_DATA_DIR=/tmp/forgefit``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORGEFIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage
    data_dir: Path = DEFAULT_DATA_DIR
    db_filename: str = "forgefit.db"
    history_limit: int = 100

    # Logging
    log_level: str = "WARNING"

    # Web server
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def db_path(self) -> Path:
        """Full path of the SQLite key-value database."""
        return self.data_dir / self.db_filename


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
