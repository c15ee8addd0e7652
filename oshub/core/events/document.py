"""Firestore document change events.

Each event carries the path parameter of the changed document and its
snapshots: ``after`` always, ``before`` only for updates.
"""

from typing import Any, Optional

from oshub.core.events.base import DomainEvent
from oshub.core.events.enums import ProfileDocumentEventType, UserDocumentEventType
from oshub.schemas import ProfileDocument, UserDocument


class UserDocumentEvent(DomainEvent):
    """Change to a document in ``users/{userId}``."""

    event_type: UserDocumentEventType

    user_id: str
    before: Optional[UserDocument] = None
    after: UserDocument

    @classmethod
    def created(cls, user_id: str, after: UserDocument, **meta: Any) -> "UserDocumentEvent":
        """Create a CREATED event."""
        return cls(
            event_type=UserDocumentEventType.CREATED, user_id=user_id, after=after, **meta
        )

    @classmethod
    def updated(
        cls, user_id: str, before: UserDocument, after: UserDocument, **meta: Any
    ) -> "UserDocumentEvent":
        """Create an UPDATED event."""
        return cls(
            event_type=UserDocumentEventType.UPDATED,
            user_id=user_id,
            before=before,
            after=after,
            **meta,
        )


class ProfileDocumentEvent(DomainEvent):
    """Change to a document in ``profiles/{profileId}``."""

    event_type: ProfileDocumentEventType

    profile_id: str
    before: Optional[ProfileDocument] = None
    after: ProfileDocument

    @classmethod
    def created(cls, profile_id: str, after: ProfileDocument, **meta: Any) -> "ProfileDocumentEvent":
        """Create a CREATED event."""
        return cls(
            event_type=ProfileDocumentEventType.CREATED,
            profile_id=profile_id,
            after=after,
            **meta,
        )

    @classmethod
    def updated(
        cls, profile_id: str, before: ProfileDocument, after: ProfileDocument, **meta: Any
    ) -> "ProfileDocumentEvent":
        """Create an UPDATED event."""
        return cls(
            event_type=ProfileDocumentEventType.UPDATED,
            profile_id=profile_id,
            before=before,
            after=after,
            **meta,
        )
