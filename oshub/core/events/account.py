"""Account lifecycle events from Firebase Authentication."""

from typing import Any, Optional

from oshub.core.events.base import DomainEvent
from oshub.core.events.enums import AccountEventType


class AccountLifecycleEvent(DomainEvent):
    """Event delivered when an account is created or deleted.

    - CREATED: a new account signed up
    - DELETED: the account was removed from the identity system
    """

    event_type: AccountEventType

    uid: str
    email: Optional[str] = None

    @classmethod
    def created(cls, uid: str, email: Optional[str] = None, **meta: Any) -> "AccountLifecycleEvent":
        """Create a CREATED event."""
        return cls(event_type=AccountEventType.CREATED, uid=uid, email=email, **meta)

    @classmethod
    def deleted(cls, uid: str, email: Optional[str] = None, **meta: Any) -> "AccountLifecycleEvent":
        """Create a DELETED event."""
        return cls(event_type=AccountEventType.DELETED, uid=uid, email=email, **meta)
