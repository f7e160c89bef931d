"""Configuration settings for Shapekit."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from shapekit.text import FILENAME_MAX_LENGTH


class OutputFormat(str, Enum):
    """CLI result format."""

    TABLE = "table"
    JSON = "json"


class OutputConfig(BaseModel):
    """Configuration for rendering results."""

    precision: int = Field(
        default=6,
        ge=0,
        le=12,
        description="Decimal places used when printing coordinates and areas",
    )
    format: OutputFormat = Field(
        default=OutputFormat.TABLE,
        description="Result format",
    )


class TextConfig(BaseModel):
    """Configuration for string helpers."""

    filename_max_length: int = Field(
        default=FILENAME_MAX_LENGTH,
        ge=1,
        le=4096,
        description="Maximum length of generated filenames",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ShapekitSettings(BaseModel):
    """Main application settings."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapekitSettings:
    """Get default application settings."""
    return ShapekitSettings()
