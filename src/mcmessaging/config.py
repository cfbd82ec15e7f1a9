"""Configuration management for mc-messaging."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import LogProfile, configure_logging


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="MCMSG_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Message Configuration
    messages_file: Optional[Path] = Field(None, description="YAML file holding message templates")
    hover_link: Optional[str] = Field(None, description="Hover text prefix for <link> tags")
    hover_command: Optional[str] = Field(None, description="Hover text prefix for <command> tags")
    capture_style_prefix: bool = Field(
        default=True, description="Keep legacy color codes right before a tag inside the clickable text"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")

    def hover_messages(self) -> dict[str, str]:
        """Hover overrides keyed by tag name, only for configured entries."""
        overrides = {"link": self.hover_link, "command": self.hover_command}
        return {kind: text for kind, text in overrides.items() if text}


def get_settings(*, log_profile: LogProfile = "default", **overrides: object) -> Settings:
    """Get application settings.

    Args:
        log_profile: Logging profile to configure with the resolved log level
        overrides: Explicit field values taking precedence over env and .env; None values are ignored

    Returns:
        Settings instance
    """
    explicit = {name: value for name, value in overrides.items() if value is not None}
    settings = Settings(**explicit)  # type: ignore[arg-type]

    configure_logging(profile=log_profile, level=settings.log_level)

    return settings
