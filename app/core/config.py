"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Coach Portal Progress Engine"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Coach Portal team"]
    AUTHORS_EMAILS: List[str] = ["N.A."]
    PROJECT_URL: str = ""

    DEBUG: bool = False

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # "text" or "json"

    # Reports
    REPORT_TOP_EXERCISES: int = 5
    REPORT_HISTORY_LIMIT: int = 10
    PROGRAM_WEEKS: int = 12

    # Chart renderer (Chart.js compatible image service)
    CHART_RENDER_URL: str = "https://quickchart.io/chart"
    CHART_WIDTH: int = 750
    CHART_HEIGHT: int = 400

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
