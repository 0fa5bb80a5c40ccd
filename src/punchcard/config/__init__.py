"""Configuration management for punchcard.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OutputConfig: Card output and diagram settings
- LoggingConfig: Logging settings
- PunchCardSettings: Main application settings
"""

from punchcard.config.settings import (
    LoggingConfig,
    OutputConfig,
    PunchCardSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "OutputConfig",
    "PunchCardSettings",
    "get_default_settings",
]
