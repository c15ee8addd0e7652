"""Core protocols for dependency injection."""

from oshub.core.protocols.analytics import AnalyticsTrackerProtocol
from oshub.core.protocols.users import UserRepositoryProtocol

__all__ = [
    "AnalyticsTrackerProtocol",
    "UserRepositoryProtocol",
]
