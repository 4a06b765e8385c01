"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Liftlog"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Weekly strength-training log with session resolution and training analytics."
    AUTHORS: List[str] = ["Liftlog contributors"]

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    # A full SQLAlchemy URL wins over the individual postgres parts below.
    DATABASE_URL: Optional[str] = None
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "liftlog"

    # Training defaults
    DEFAULT_TRAINING_DAYS_PER_WEEK: int = 4
    PERSONAL_BESTS_LIMIT: int = 5
    DEFAULT_STATS_RANGE: str = "30d"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def sqlalchemy_url(self) -> str:
        """Return the database URL the engine and Alembic should use."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
