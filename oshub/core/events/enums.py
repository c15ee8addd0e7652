"""Event type enums for the events the functions react to.

Values follow ``{source}.{action}``: ``account`` for Firebase Authentication
triggers, the collection name for Firestore document triggers.
"""

from enum import Enum


class AccountEventType(str, Enum):
    """Firebase Authentication account lifecycle event types."""

    CREATED = "account.created"
    DELETED = "account.deleted"


class UserDocumentEventType(str, Enum):
    """``users`` collection document event types."""

    CREATED = "users.created"
    UPDATED = "users.updated"


class ProfileDocumentEventType(str, Enum):
    """``profiles`` collection document event types."""

    CREATED = "profiles.created"
    UPDATED = "profiles.updated"


EventType = AccountEventType | UserDocumentEventType | ProfileDocumentEventType
