"""
Bootstrap configuration loaded from environment variables.

Values are read from the process environment first, then from
``db_visualizer/mongodb.env`` and ``.env`` (``export KEY=value`` lines are accepted).
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from signup_db.core.exceptions import ConfigError


class Settings(BaseSettings):
    """Bootstrap settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=("db_visualizer/mongodb.env", ".env"),
        extra="ignore",
    )

    # MongoDB
    mongodb_url: Optional[str] = Field(default=None)
    mongodb_db: Optional[str] = Field(default=None)
    server_selection_timeout_ms: int = Field(default=30000, gt=0)

    # Logging
    log_level: str = Field(default="INFO")

    def connection_params(
        self,
        url: Optional[str] = None,
        db_name: Optional[str] = None,
    ) -> tuple[str, str]:
        """
        Resolve the connection URL and database name.

        Explicit arguments win over settings values.

        Raises:
            ConfigError: If either value is missing
        """
        url = url or self.mongodb_url
        db_name = db_name or self.mongodb_db
        if not url or not db_name:
            raise ConfigError(
                "Missing environment variables. Ensure MONGODB_URL and MONGODB_DB are set."
            )
        return url, db_name


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Raises:
        ConfigError: If an environment value cannot be parsed
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError("Invalid bootstrap settings", cause=e) from e
