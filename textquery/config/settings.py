"""Configuration management using Pydantic Settings.

Settings are grouped into nested models and loaded from environment variables
(prefixed with ``TEXTQUERY_``) or a local ``.env`` file:
- LoggingConfig: console/file levels and the optional log file
- CommandConfig: defaults used when building commands from config
"""

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("textquery.log")
    file_logging: bool = False


class CommandConfig(BaseModel):
    """Defaults applied by the command registry."""

    default_limit_count: int = Field(default=10, ge=0)


class Settings(BaseSettings):
    """Main settings with environment variable support.

    Nested values use a double underscore, e.g.
    ``TEXTQUERY_LOGGING__CONSOLE_LEVEL=DEBUG`` or
    ``TEXTQUERY_COMMANDS__DEFAULT_LIMIT_COUNT=25``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEXTQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    commands: CommandConfig = CommandConfig()


# Singleton instance for application use
settings = Settings()
