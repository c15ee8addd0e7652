"""Subscriber that maps platform events to Segment analytics calls."""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from oshub.adapters.analytics.naming import event_name
from oshub.core.events import (
    AccountEventType,
    AccountLifecycleEvent,
    ProfileDocumentEvent,
    ProfileDocumentEventType,
    UserDocumentEvent,
    UserDocumentEventType,
)
from oshub.core.logging import logger
from oshub.core.protocols import AnalyticsTrackerProtocol, UserRepositoryProtocol
from oshub.schemas import ProfileDocument, UserDocument

_Event = Union[AccountLifecycleEvent, UserDocumentEvent, ProfileDocumentEvent]

DEFAULT_GROUP_ID = "opensourcehub"


class AnalyticsEventSubscriber:
    """Maps account and document events to identify/group/track calls.

    Each ``_handle_*`` method converts one event type into its analytics
    shape. Adding a new tracked event = one new method + one entry in
    ``_handlers``.

    Two trait vocabularies coexist in the Segment workspace: user documents
    identify with camelCase keys (``githubLogin``, ``isProjectMaintainer``),
    profile changes with snake_case keys (``is_project_maintainer``,
    ``send_me_osh_news``). Keep them apart.
    """

    def __init__(
        self,
        tracker: AnalyticsTrackerProtocol,
        users: UserRepositoryProtocol,
        group_id: str = DEFAULT_GROUP_ID,
        flush_on_complete: bool = True,
    ) -> None:
        """Wire handler dispatch table to the given tracker and user lookup."""
        self._tracker = tracker
        self._users = users
        self._group_id = group_id
        self._flush_on_complete = flush_on_complete
        self._handlers: Dict[str, Callable[[Any], Awaitable[None]]] = {
            AccountEventType.CREATED.value: self._handle_account_created,
            AccountEventType.DELETED.value: self._handle_account_deleted,
            UserDocumentEventType.CREATED.value: self._handle_user_created,
            UserDocumentEventType.UPDATED.value: self._handle_user_updated,
            ProfileDocumentEventType.CREATED.value: self._handle_profile_changed,
            ProfileDocumentEventType.UPDATED.value: self._handle_profile_changed,
        }

    async def handle(self, event: _Event) -> None:
        """Dispatch an event to its handler, then flush the tracker.

        Handler failures are logged, never raised.
        """
        event_type_value: str = event.event_type.value
        handler = self._handlers.get(event_type_value)
        if handler is None:
            return
        try:
            await handler(event)
        except Exception as e:
            logger.error(
                f"AnalyticsEventSubscriber failed for '{event_type_value}': {e}",
                extra={"event_type": event_type_value, "event_id": event.event_id},
            )
        if self._flush_on_complete:
            await self._flush()

    async def _flush(self) -> None:
        try:
            await asyncio.to_thread(self._tracker.flush)
        except Exception as e:
            logger.error(f"Failed to flush analytics tracker: {e}")

    # ------------------------------------------------------------------
    # Account events
    # ------------------------------------------------------------------

    async def _handle_account_created(self, event: AccountLifecycleEvent) -> None:
        logger.with_context(
            event_type=event.event_type.value, uid=event.uid, event_id=event.event_id
        ).info("User created")

        traits = {"email": event.email} if event.email is not None else {}
        self._tracker.identify(user_id=event.uid, traits=traits)
        self._tracker.group(user_id=event.uid, group_id=self._group_id)
        self._tracker.track(user_id=event.uid, event=event_name("User created"))

    async def _handle_account_deleted(self, event: AccountLifecycleEvent) -> None:
        logger.with_context(
            event_type=event.event_type.value, uid=event.uid, event_id=event.event_id
        ).info("User deleted")

        self._tracker.track(user_id=event.uid, event=event_name("User deleted"))

    # ------------------------------------------------------------------
    # users/{userId}
    # ------------------------------------------------------------------

    async def _handle_user_created(self, event: UserDocumentEvent) -> None:
        logger.with_context(
            event_type=event.event_type.value, user_id=event.user_id, event_id=event.event_id
        ).info("User document created")

        self._identify_user(event.user_id, event.after)

    async def _handle_user_updated(self, event: UserDocumentEvent) -> None:
        log = logger.with_context(
            event_type=event.event_type.value, user_id=event.user_id, event_id=event.event_id
        )
        log.info("User document updated")

        # Only a change to an identify trait warrants a new identify call.
        if event.before is not None and event.before.traits() == event.after.traits():
            log.debug("No watched user fields changed")
            return

        self._identify_user(event.user_id, event.after)

    def _identify_user(self, path_user_id: str, doc: UserDocument) -> None:
        self._tracker.identify(user_id=doc.uid or path_user_id, traits=doc.traits())

    # ------------------------------------------------------------------
    # profiles/{profileId}
    # ------------------------------------------------------------------

    async def _handle_profile_changed(self, event: ProfileDocumentEvent) -> None:
        before = event.before or ProfileDocument()
        after = event.after
        log = logger.with_context(
            event_type=event.event_type.value,
            profile_id=event.profile_id,
            user_id=after.user_id,
            event_id=event.event_id,
        )
        log.info("Profile changed")

        maintainer_changed = bool(before.is_project_maintainer) != bool(
            after.is_project_maintainer
        )
        newsletter_changed = bool(before.join_newsletter) != bool(after.join_newsletter)
        if not (maintainer_changed or newsletter_changed):
            log.debug("No watched profile fields changed")
            return

        try:
            user = await self._resolve_profile_owner(after.user_id)
        except Exception as e:
            log.error(f"Could not resolve user document for profile: {e}")
            return
        if user is None:
            log.error("Could not resolve user document for profile")
            return

        traits: Dict[str, Any] = {"githubLogin": user.github_login, "email": user.email}
        traits = {k: v for k, v in traits.items() if v is not None}
        traits["is_project_maintainer"] = bool(after.is_project_maintainer)
        traits["send_me_osh_news"] = bool(after.join_newsletter)

        self._tracker.identify(user_id=after.user_id, traits=traits)

    async def _resolve_profile_owner(self, user_id: Optional[str]) -> Optional[UserDocument]:
        """Look up the user document owning a profile.

        A profile without ``userId`` is a miss. Transport errors propagate.
        """
        if not user_id:
            return None
        return await self._users.get_by_uid(user_id)
