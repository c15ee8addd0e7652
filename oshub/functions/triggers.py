"""Background-trigger entrypoints.

Each function has the Cloud Functions background signature
``(data, context)``. It builds the process container on first use, decodes
the payload into a domain event, and runs the analytics subscriber to
completion before returning, so every queued Segment call is flushed
before the platform considers the invocation done.

Only a ConfigurationError escapes an entrypoint; the platform then records
the invocation as failed.
"""

import asyncio
from typing import Any, Callable

from oshub.core.container import get_container
from oshub.core.events import (
    AccountEventType,
    DomainEvent,
    ProfileDocumentEventType,
    UserDocumentEventType,
)
from oshub.core.exceptions import InvalidEventError
from oshub.core.logging import logger
from oshub.functions import payloads


def _dispatch(build_event: Callable[[], DomainEvent]) -> None:
    subscriber = get_container().analytics_subscriber

    try:
        event = build_event()
    except InvalidEventError as e:
        logger.error(f"Dropping malformed event: {e}")
        return

    asyncio.run(subscriber.handle(event))


def user_created(data: Any, context: Any) -> None:
    """providers/firebase.auth/eventTypes/user.create"""
    _dispatch(lambda: payloads.account_event(AccountEventType.CREATED, data, context))


def user_deleted(data: Any, context: Any) -> None:
    """providers/firebase.auth/eventTypes/user.delete"""
    _dispatch(lambda: payloads.account_event(AccountEventType.DELETED, data, context))


def user_document_created(data: Any, context: Any) -> None:
    """providers/cloud.firestore/eventTypes/document.create on users/{userId}"""
    _dispatch(
        lambda: payloads.user_document_event(UserDocumentEventType.CREATED, data, context)
    )


def user_document_updated(data: Any, context: Any) -> None:
    """providers/cloud.firestore/eventTypes/document.update on users/{userId}"""
    _dispatch(
        lambda: payloads.user_document_event(UserDocumentEventType.UPDATED, data, context)
    )


def profile_created(data: Any, context: Any) -> None:
    """providers/cloud.firestore/eventTypes/document.create on profiles/{profileId}"""
    _dispatch(
        lambda: payloads.profile_document_event(ProfileDocumentEventType.CREATED, data, context)
    )


def profile_updated(data: Any, context: Any) -> None:
    """providers/cloud.firestore/eventTypes/document.update on profiles/{profileId}"""
    _dispatch(
        lambda: payloads.profile_document_event(ProfileDocumentEventType.UPDATED, data, context)
    )
