"""
Renderer configuration.

This module provides default values used by the feed renderers,
loaded from environment variables.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"


class SyndicSettings(BaseSettings):
    """
    Renderer configuration from environment variables.

    All settings are prefixed with SYNDIC_ in environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="SYNDIC_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Written to <generator> when the feed does not name its own
    generator: str = "https://github.com/syndic/syndic"
    rss_docs_url: str = "https://validator.w3.org/feed/docs/rss2.html"

    # Output formatting
    xml_indent: int = Field(default=4, ge=0, le=16)
    json_indent: int = Field(default=4, ge=0, le=16)

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# Global instance
settings = SyndicSettings()
