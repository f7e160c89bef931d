"""Configuration management for shapekit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OutputConfig: Result rendering settings
- TextConfig: String helper settings
- LoggingConfig: Logging settings
- ShapekitSettings: Main application settings
"""

from shapekit.config.settings import (
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    ShapekitSettings,
    TextConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "ShapekitSettings",
    "TextConfig",
    "get_default_settings",
]
