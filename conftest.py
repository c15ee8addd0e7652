"""Root conftest for pytest configuration and shared fixtures.

Loaded before the colocated tests under oshub/, making its fixtures
available to every test package.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any oshub module import
# Uses setdefault so real env vars (CI, e2e) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEGMENT_WRITE_KEY", "test-write-key")
os.environ.setdefault("ANALYTICS_ENABLED", "false")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_tracker():
    """Fake analytics tracker that records identify/group/track calls."""
    from oshub.adapters.analytics.fake import FakeAnalyticsTracker

    return FakeAnalyticsTracker()


@pytest.fixture
def fake_users():
    """Fake user repository backed by a dict."""
    from oshub.adapters.firestore.fake import FakeUserRepository

    return FakeUserRepository()


@pytest.fixture
def analytics_subscriber(fake_tracker, fake_users):
    """Subscriber wired to the fake tracker and fake user repository."""
    from oshub.adapters.analytics.subscriber import AnalyticsEventSubscriber

    return AnalyticsEventSubscriber(tracker=fake_tracker, users=fake_users)


@pytest.fixture
def test_container(fake_tracker, fake_users, analytics_subscriber):
    """A Container with all dependencies replaced by fakes."""
    from oshub.core.container import Container

    return Container(
        tracker=fake_tracker,
        users=fake_users,
        analytics_subscriber=analytics_subscriber,
    )
