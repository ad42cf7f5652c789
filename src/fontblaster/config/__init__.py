"""Configuration management for fontblaster.

This module provides configuration management using Pydantic models.

Key classes:
- DiscoveryConfig: Bundle traversal settings
- LoggingConfig: Diagnostics settings
- BlasterSettings: Main library settings
"""

from fontblaster.config.settings import (
    BlasterSettings,
    DiscoveryConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "BlasterSettings",
    "DiscoveryConfig",
    "LoggingConfig",
    "get_default_settings",
]
