"""Utility functions for shapekit.

This module provides logging setup and command statistics tracking.
"""

from shapekit.utils.logging import (
    CommandLogger,
    CommandStats,
    configure_logging,
)

__all__ = [
    "CommandLogger",
    "CommandStats",
    "configure_logging",
]
