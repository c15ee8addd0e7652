"""Fake analytics tracker for testing."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class TrackedCall:
    """Single recorded analytics call."""

    kind: str  # "identify" | "group" | "track"
    user_id: str
    traits: Dict[str, Any] = field(default_factory=dict)
    group_id: Optional[str] = None
    event: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)


class FakeAnalyticsTracker:
    """In-memory test double for AnalyticsTrackerProtocol.

    Records all calls for assertions.

    Usage:
        tracker = FakeAnalyticsTracker()
        subscriber = AnalyticsEventSubscriber(tracker, users)
        await subscriber.handle(some_event)
        assert tracker.get_track("[OSH] User created").user_id == "u1"
    """

    def __init__(self) -> None:
        """Initialize with empty call list."""
        self.calls: list[TrackedCall] = []
        self.flush_count = 0

    def identify(self, user_id: str, traits: Dict[str, Any]) -> None:
        """Record an identify call."""
        self.calls.append(TrackedCall(kind="identify", user_id=user_id, traits=dict(traits)))

    def group(
        self, user_id: str, group_id: str, traits: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a group call."""
        self.calls.append(
            TrackedCall(kind="group", user_id=user_id, group_id=group_id, traits=traits or {})
        )

    def track(
        self, user_id: str, event: str, properties: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a track call."""
        self.calls.append(
            TrackedCall(kind="track", user_id=user_id, event=event, properties=properties or {})
        )

    def flush(self) -> None:
        """Count flushes."""
        self.flush_count += 1

    # Test helpers

    def of_kind(self, kind: str) -> list[TrackedCall]:
        """Return all calls of the given kind, in order."""
        return [c for c in self.calls if c.kind == kind]

    def get_track(self, event: str) -> TrackedCall:
        """Return the first track call for *event*, or raise AssertionError."""
        for c in self.of_kind("track"):
            if c.event == event:
                return c
        raise AssertionError(
            f"No track call for '{event}'. Tracked: {[c.event for c in self.of_kind('track')]}"
        )

    def clear(self) -> None:
        """Reset recorded calls."""
        self.calls.clear()
        self.flush_count = 0
