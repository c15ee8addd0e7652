"""Domain events consumed by the analytics subscriber."""

from oshub.core.events.account import AccountLifecycleEvent
from oshub.core.events.base import DomainEvent
from oshub.core.events.document import ProfileDocumentEvent, UserDocumentEvent
from oshub.core.events.enums import (
    AccountEventType,
    EventType,
    ProfileDocumentEventType,
    UserDocumentEventType,
)

__all__ = [
    "AccountEventType",
    "AccountLifecycleEvent",
    "DomainEvent",
    "EventType",
    "ProfileDocumentEvent",
    "ProfileDocumentEventType",
    "UserDocumentEvent",
    "UserDocumentEventType",
]
