"""
Configuration management for the npm package info MCP server.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server identity advertised during MCP initialization
    mcp_server_name: str = Field(default="npm-package-info-server", description="MCP server name")
    mcp_server_version: str = Field(default="1.0.0", description="MCP server version")

    # Registry tool
    npm_command: str = Field(default="npm", description="Executable used to query the npm registry")
    default_search_limit: int = Field(default=10, ge=1, description="Search result cap when none is given")

    # Logging
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=True, description="Render logs as JSON instead of console text")


@lru_cache()
def get_settings() -> Settings:
    """Get cached server settings."""
    return Settings()
