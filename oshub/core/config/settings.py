"""Application settings.

All values are read from the process environment (or a local ``.env`` file)
by Pydantic Settings. Nothing here is required at import time: the Segment
write key is validated when the analytics tracker is built, so a missing key
fails the invocation that needs it rather than the module import.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from oshub.core.config.enums import Environment


class Settings(BaseSettings):
    """Environment-driven settings for the trigger functions."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ENVIRONMENT: Environment = Environment.LOCAL
    LOG_LEVEL: str = "INFO"

    # Segment
    SEGMENT_WRITE_KEY: Optional[str] = None
    SEGMENT_HOST: Optional[str] = None
    SEGMENT_SYNC_MODE: bool = False
    SEGMENT_DEBUG: bool = False

    # Analytics behavior
    ANALYTICS_ENABLED: bool = True
    ANALYTICS_GROUP_ID: str = Field(
        "opensourcehub", description="Group every new account is associated with"
    )

    # Firestore (both auto-detected by the client library when unset)
    FIRESTORE_PROJECT: Optional[str] = None
    FIRESTORE_DATABASE: Optional[str] = None
