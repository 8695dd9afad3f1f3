"""Configuration management for the link forwarder."""

from typing import Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


NotFoundPolicy = Literal["redirect", "not_found"]


class Config(BaseSettings):
    """Application configuration."""

    # Storage settings
    data_dir: str = Field(
        default=".crush",
        description="Directory holding the SQLite links.db file (created if missing)"
    )

    database_url: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL; when set, used instead of SQLite"
    )

    create_tables: bool = Field(
        default=True,
        description="Create the links table on startup if it does not exist"
    )

    seed_defaults: bool = Field(
        default=True,
        description="Upsert the default 'google' and 'github' links on startup"
    )

    # Forwarding settings
    not_found_policy: NotFoundPolicy = Field(
        default="redirect",
        description=(
            "What GET /{shortcode} does for an unknown shortcode: 'redirect' sends the "
            "browser to the management page with ?shortcode=...&error=not_found; "
            "'not_found' answers a bare 404"
        )
    )

    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL used for short links when the request carries no host"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
