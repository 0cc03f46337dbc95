"""Configuration management for schemakit."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.schemakit/.env
    3. Package directory (where this file is located)
    """
    if os.path.exists(".env"):
        return ".env"

    user_env = Path.home() / ".schemakit" / ".env"
    if user_env.exists():
        return str(user_env)

    package_dir = Path(__file__).parent.parent
    package_env = package_dir / ".env"
    if package_env.exists():
        return str(package_env)

    return None


@dataclass
class ConnectionConfig:
    """Connection parameters handed to drivers and reflection queries.

    ``schema`` is the Postgres namespace to reflect. MySQL reflects
    ``database`` and SQLite ignores both.
    """
    database: str = ":memory:"
    schema: str = "public"
    host: Optional[str] = None
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMAKIT_",
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    driver: str = Field(
        default="sqlite",
        description="Database driver: sqlite, postgres or mysql"
    )
    database: str = Field(
        default=":memory:",
        description="Database name, or file path for SQLite"
    )
    host: Optional[str] = Field(
        default=None,
        description="Database server host"
    )
    port: Optional[int] = Field(
        default=None,
        description="Database server port"
    )
    username: Optional[str] = Field(
        default=None,
        description="Database user"
    )
    password: Optional[str] = Field(
        default=None,
        description="Database password"
    )
    schema_name: str = Field(
        default="public",
        description="Schema reflected on Postgres"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI"
    )

    def connection_config(self, **overrides: Any) -> ConnectionConfig:
        """Build a ConnectionConfig, overriding fields that are not None."""
        values = {
            "database": self.database,
            "schema": self.schema_name,
            "host": self.host,
            "port": self.port,
            "username": self.username,
            "password": self.password,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return ConnectionConfig(**values)


# Global settings instance
settings = Settings()
