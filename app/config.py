"""
Configuration settings for the IR translator backend.
Loads environment variables and provides application settings.
"""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


def _get_default_database_url() -> str:
    """
    SQLite database under the project data directory.

    Returns:
        SQLAlchemy URL for <project root>/data/ir_translator.db
    """
    # app/config.py -> app -> project root
    project_root = Path(__file__).resolve().parent.parent
    return f"sqlite:///{project_root / 'data' / 'ir_translator.db'}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (custom term storage)
    DATABASE_URL: str = _get_default_database_url()

    # JWT (tokens are issued by the external identity service)
    JWT_SECRET: str
    JWT_ALGORITHMS: List[str] = ["HS256"]

    # Server
    PORT: int = 3000
    LOG_LEVEL: str = "info"

    # CORS
    CORS_ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Custom term cache
    TERM_CACHE_TTL_SECONDS: int = 300

    # Highlighting
    MAX_TEXT_LENGTH: int = 100000

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def allowed_origins_list(self) -> List[str]:
        """Convert CORS allowed origins string to list."""
        return [origin.strip() for origin in self.CORS_ALLOWED_ORIGINS.split(',') if origin.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# Global settings instance
settings = Settings()
