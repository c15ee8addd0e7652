"""Protocol for analytics tracking adapters."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class AnalyticsTrackerProtocol(Protocol):
    """Identify/group/track calls against the analytics provider.

    Adapter boundary between event handling and the analytics provider
    (Segment today). Calls are queued by the implementation; ``flush``
    blocks until the queue has been handed off.
    """

    def identify(self, user_id: str, traits: Dict[str, Any]) -> None:
        """Associate *traits* with *user_id*.

        Implementations must never raise: errors are logged.
        """
        ...

    def group(
        self, user_id: str, group_id: str, traits: Optional[Dict[str, Any]] = None
    ) -> None:
        """Associate *user_id* with the group *group_id*."""
        ...

    def track(
        self, user_id: str, event: str, properties: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record that *event* happened for *user_id*."""
        ...

    def flush(self) -> None:
        """Block until every queued call has been sent."""
        ...
