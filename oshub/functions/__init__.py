"""Cloud Functions trigger entrypoints."""

from oshub.functions.triggers import (
    profile_created,
    profile_updated,
    user_created,
    user_deleted,
    user_document_created,
    user_document_updated,
)

__all__ = [
    "profile_created",
    "profile_updated",
    "user_created",
    "user_deleted",
    "user_document_created",
    "user_document_updated",
]
