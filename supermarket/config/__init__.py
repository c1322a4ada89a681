"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from supermarket.config import get_settings, Settings

    settings = get_settings()
    print(settings.app_name)
    print(settings.api_prefix)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
