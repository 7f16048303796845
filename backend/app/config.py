"""
DreamHome API — Application Configuration
===========================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.

The database connection is described either by the individual DB_* variables
(host, port, user, password, database name) or by a complete DATABASE_URL,
which wins when set.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for a local MySQL instance.
    Attributes are grouped by concern for readability.
    """

    # ── Database ──────────────────────────────────────────────────────────
    db_host: str = Field(default="127.0.0.1")
    db_port: int = Field(default=3306, ge=1, le=65535)
    db_user: str = Field(default="root")
    db_pass: str = Field(default="")
    db_name: str = Field(default="dreamhome")

    # What: Full async SQLAlchemy URL, e.g. mysql+aiomysql://user:pw@host/db
    # Overrides the DB_* parts above when present.
    database_url: Optional[str] = Field(
        default=None,
        description="Async SQLAlchemy connection URL (overrides DB_* settings)",
    )

    # Pool sizing. DB_POOL_SIZE=1 with DB_MAX_OVERFLOW=0 gives a single
    # shared connection.
    db_pool_size: int = Field(default=5, ge=1, le=100)
    db_max_overflow: int = Field(default=5, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)

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
        "case_sensitive": False,  # DB_HOST and db_host both work
        "extra": "ignore",
    }

    @property
    def sqlalchemy_url(self) -> URL:
        """
        What:  The URL the engine connects to.
        How:   DATABASE_URL if set; otherwise assembled from the DB_* parts
               for the aiomysql driver. URL.create quotes the password, so
               special characters in DB_PASS are safe.
        """
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            "mysql+aiomysql",
            username=self.db_user,
            password=self.db_pass or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def safe_database_url(self) -> str:
        """Database URL with the password masked, for log output."""
        return self.sqlalchemy_url.render_as_string(hide_password=True)


# Singleton instance — imported throughout the application
settings = Settings()
