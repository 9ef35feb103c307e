"""
Feed fetching configuration.

Settings are loaded from environment variables prefixed with UNIFEED_.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_env_file = Path.cwd() / ".env"


class FeederSettings(BaseSettings):
    """Settings for fetching and parsing feeds."""

    model_config = SettingsConfigDict(
        env_prefix="UNIFEED_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fetch_timeout_seconds: int = 30
    user_agent: str = "Unifeed/0.1"
    follow_redirects: bool = True
    log_level: str = "INFO"


# Global instance
settings = FeederSettings()
