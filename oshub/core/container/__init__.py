"""Dependency Injection Container Module.

Usage:
------
    # In trigger entrypoints (built on first invocation, then reused)
    from oshub.core.container import get_container
    subscriber = get_container().analytics_subscriber

    # In tests (construct directly with fakes, don't use global)
    from oshub.core.container import Container
    test_container = Container(
        tracker=FakeAnalyticsTracker(),
        users=FakeUserRepository(),
        analytics_subscriber=AnalyticsEventSubscriber(...),
    )

Module structure:
-----------------
    container/
    ├── __init__.py      # This file - exports public API
    ├── container.py     # Container dataclass (serves)
    └── factory.py       # create_container() (builds)
"""

from typing import TYPE_CHECKING, Optional

from oshub.core.container.container import Container
from oshub.core.container.factory import create_container

if TYPE_CHECKING:
    from oshub.core.config import Settings

__all__ = [
    "Container",
    "create_container",
    "container",
    "get_container",
    "initialize_container",
    "reset_container",
]


container: Optional[Container] = None
"""Global container instance, built by `initialize_container()`."""


def initialize_container(settings: "Settings") -> None:
    """Initialize the global container. Call once per process.

    Raises:
        RuntimeError: If the container is already initialized.
        ConfigurationError: If settings are incomplete. The global stays
            unset, so the next invocation tries again.
    """
    global container

    if container is not None:
        raise RuntimeError(
            "Container already initialized. "
            "initialize_container() should only be called once per process."
        )

    container = create_container(settings)


def get_container() -> Container:
    """Return the global container, building it from settings on first use."""
    if container is None:
        from oshub.core.config import settings

        initialize_container(settings)
    assert container is not None
    return container


def reset_container() -> None:
    """Reset the global container to None. For testing only."""
    global container
    container = None
