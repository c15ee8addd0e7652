"""Configuration module for the trigger functions.

Usage:
    from oshub.core.config import settings, Environment

    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from oshub.core.config.enums import Environment
from oshub.core.config.settings import Settings

__all__ = [
    "Environment",
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
