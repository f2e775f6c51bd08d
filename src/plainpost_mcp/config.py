"""PlainPost-mcp settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """PlainPost MCP server settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Symbol preset used when a tool call names none (minimal/structured/social)
    plainpost_default_style: str = "structured"

    # Pangu CJK/Latin spacing when a tool call does not say
    plainpost_pangu_enabled: bool = False

    # Include link spans in format_post results
    plainpost_highlight_links: bool = True
