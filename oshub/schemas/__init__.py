"""Snapshot schemas for the Firestore documents the functions observe."""

from oshub.schemas.profile_document import ProfileDocument
from oshub.schemas.user_document import UserDocument

__all__ = ["ProfileDocument", "UserDocument"]
