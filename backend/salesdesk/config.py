"""
SalesDesk API — Application Configuration
==========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the database layer and the entry point.
When:  Loaded once at module import time.

The database connection is described by discrete settings (host, user,
password, name, port, pool size) matching the MariaDB deployment. Tests and
alternative deployments may set DATABASE_URL instead, which wins over the
composed URL.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for a local MariaDB holding the
    `sample` schema. Attributes are grouped by concern.
    """

    # ── Database ──────────────────────────────────────────────────────────
    db_host: str = Field(default="localhost")
    db_user: str = Field(default="root")
    db_password: str = Field(default="root")
    db_name: str = Field(default="sample")
    db_port: int = Field(default=3306, ge=1, le=65535)

    # SQLAlchemy dialect+driver used to compose the URL
    db_driver: str = Field(default="mysql+aiomysql")

    # Fixed pool capacity; requests beyond it wait for a free connection
    db_pool_size: int = Field(default=5, ge=1, le=100)

    # Seconds a request waits for a pooled connection before failing
    db_pool_timeout: int = Field(default=30, ge=1, le=300)

    # Full override, e.g. sqlite+aiosqlite:///./test.db
    database_url: Optional[str] = Field(default=None)

    @property
    def sqlalchemy_url(self) -> URL:
        """
        What: The URL handed to create_async_engine.
        How:  DATABASE_URL if set, otherwise composed from the db_* fields
              with URL.create so credentials need no manual escaping.
        """
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
