"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic; that belongs in the factory.
"""

from dataclasses import dataclass, replace
from typing import Any

from oshub.adapters.analytics.subscriber import AnalyticsEventSubscriber
from oshub.core.protocols import AnalyticsTrackerProtocol, UserRepositoryProtocol


@dataclass(frozen=True)
class Container:
    """Immutable container holding the process-wide dependencies.

    Usage:
        # Trigger entrypoints: use the global container built by the factory
        from oshub.core.container import get_container
        await get_container().analytics_subscriber.handle(event)

        # Testing: construct directly with fakes (see conftest.py)
        test_container = Container(tracker=FakeAnalyticsTracker(), ...)
    """

    # Segment client wrapper, shared by every invocation in the process
    tracker: AnalyticsTrackerProtocol

    # users collection lookups (profile owner resolution)
    users: UserRepositoryProtocol

    # Maps platform events to analytics calls
    analytics_subscriber: AnalyticsEventSubscriber

    def replace(self, **changes: Any) -> "Container":
        """Return a copy with some dependencies swapped out."""
        return replace(self, **changes)
