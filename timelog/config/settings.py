"""Application configuration

Settings are loaded with Pydantic Settings from environment variables and an
optional .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    """Application settings"""

    # App
    APP_TITLE: str = "TimeLog - Sector Ops"
    APP_DESCRIPTION: str = "Well-completion operations timeline API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Session cookie signing (UI selection state)
    SECRET_KEY: str = "change-me"
    SESSION_MAX_AGE: int = 60 * 60 * 12

    # MySQL - only used when DATABASE_URL is empty and MYSQL_USER is set
    MYSQL_USER: Optional[str] = None
    MYSQL_PASSWORD: Optional[str] = None
    MYSQL_HOST: str = "127.0.0.1"
    MYSQL_PORT: str = "3306"
    MYSQL_DB: str = "timelog"

    DATABASE_URL: str = ""
    ECHO_SQL: bool = False  # log SQL statements

    # Upstream oilfield data API (OAuth 2.0 client credentials)
    UPSTREAM_BASE_URL: str = "https://upstream.example.com/ords/los_adw_apex/v1"
    UPSTREAM_TOKEN_URL: str = "https://upstream.example.com/ords/los_adw_apex/oauth/token"
    UPSTREAM_CLIENT_ID: Optional[str] = None
    UPSTREAM_CLIENT_SECRET: Optional[str] = None
    UPSTREAM_TIMEOUT: float = 30.0

    # Domain defaults
    DEFAULT_PLANNED_STAGES: int = 26
    STATE_FILE: str = "./var/project_state.json"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Build DATABASE_URL when it is not given explicitly
        if not self.DATABASE_URL:
            if self.MYSQL_USER and self.MYSQL_PASSWORD:
                self.DATABASE_URL = f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
            else:
                self.DATABASE_URL = "sqlite:///./timelog.db"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
