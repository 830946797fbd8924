"""Application settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Result pages server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default; there is no auth layer in front of the MCP endpoint.
    pages_host: str = "127.0.0.1"
    pages_port: int = 8001
    pages_log_level: str = "info"
    # Must be set true to bind anything other than a loopback address.
    pages_allow_insecure_bind: bool = False

    # Reference data
    # Empty means the YAML shipped inside the package.
    reference_data_path: str = ""
    tdee_page_limit: int = 500
    # ISO date (YYYY-MM-DD); empty keeps the anchor declared in the YAML.
    projection_start_date: str = ""


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
