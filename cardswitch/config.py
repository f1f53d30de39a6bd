"""
Switch configuration.

Values come from CARDSWITCH_* environment variables or a local .env file.
"""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CARDSWITCH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    service_name: str = "cardswitch"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 3000

    # Ledger: "memory" keeps a locked dict, "sql" goes through SQLAlchemy.
    # The default database is in-memory SQLite, so nothing outlives the process.
    ledger_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///:memory:"


# Global settings instance
settings = Settings()
