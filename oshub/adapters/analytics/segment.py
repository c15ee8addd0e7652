"""Segment analytics tracker adapter."""

from typing import Any, Dict, Optional

from segment.analytics import Client

from oshub.core.config import Settings
from oshub.core.exceptions import ConfigurationError
from oshub.core.logging import logger


class SegmentTracker:
    """Wraps the Segment SDK client behind AnalyticsTrackerProtocol.

    The SDK queues messages and uploads them from a background thread;
    ``flush`` blocks until the queue is drained. Upload failures surface
    through the SDK's ``on_error`` callback and are logged, never raised.
    """

    def __init__(self, settings: Settings) -> None:
        """Build the Segment client from application settings.

        Raises:
            ConfigurationError: analytics is enabled but no write key is set.
        """
        self._enabled = settings.ANALYTICS_ENABLED
        self._client: Optional[Client] = None

        if not self._enabled:
            logger.info("Segment analytics tracker disabled")
            return

        if not settings.SEGMENT_WRITE_KEY:
            raise ConfigurationError("SEGMENT_WRITE_KEY")

        client_kwargs: Dict[str, Any] = {
            "write_key": settings.SEGMENT_WRITE_KEY,
            "debug": settings.SEGMENT_DEBUG,
            "sync_mode": settings.SEGMENT_SYNC_MODE,
            "on_error": self._on_error,
        }
        if settings.SEGMENT_HOST:
            client_kwargs["host"] = settings.SEGMENT_HOST

        self._client = Client(**client_kwargs)
        logger.info(f"Segment analytics tracker initialized (env={settings.ENVIRONMENT.value})")

    @staticmethod
    def _on_error(error: Exception, items: list) -> None:
        logger.error(f"Segment upload failed for {len(items)} message(s): {error}")

    def identify(self, user_id: str, traits: Dict[str, Any]) -> None:
        """Send an identify call."""
        if self._client is None:
            return
        try:
            self._client.identify(user_id=user_id, traits=traits)
        except Exception as e:
            logger.error(f"Failed to send identify for '{user_id}': {e}")

    def group(
        self, user_id: str, group_id: str, traits: Optional[Dict[str, Any]] = None
    ) -> None:
        """Send a group call."""
        if self._client is None:
            return
        try:
            self._client.group(user_id=user_id, group_id=group_id, traits=traits or {})
        except Exception as e:
            logger.error(f"Failed to send group '{group_id}' for '{user_id}': {e}")

    def track(
        self, user_id: str, event: str, properties: Optional[Dict[str, Any]] = None
    ) -> None:
        """Send a track call."""
        if self._client is None:
            return
        try:
            self._client.track(user_id=user_id, event=event, properties=properties or {})
        except Exception as e:
            logger.error(f"Failed to track analytics event '{event}': {e}")

    def flush(self) -> None:
        """Block until the SDK queue is drained."""
        if self._client is None:
            return
        self._client.flush()
