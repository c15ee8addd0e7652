"""Firestore-backed user repository.

Implements UserRepositoryProtocol over the ``users`` collection.
Uses Application Default Credentials for authentication.
"""

import asyncio
from typing import Optional

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from oshub.adapters.firestore.collections import COLLECTION_USERS
from oshub.core.exceptions import ExternalServiceError
from oshub.core.logging import logger
from oshub.schemas import UserDocument


class FirestoreUserRepository:
    """Point lookups against the ``users`` collection.

    Authentication works via:
    - the function's runtime service account (Cloud Functions)
    - GOOGLE_APPLICATION_CREDENTIALS env var (service account JSON)
    - gcloud CLI default credentials

    Note: the sync Firestore client is used and wrapped in
    asyncio.to_thread, so one client can be shared across invocations
    that each run their own event loop.
    """

    def __init__(
        self,
        project: Optional[str] = None,
        database: Optional[str] = None,
        collection: str = COLLECTION_USERS,
    ):
        """Initialize the repository.

        Args:
            project: Optional GCP project ID (usually auto-detected)
            database: Optional Firestore database ID (defaults to "(default)")
            collection: Collection holding user documents
        """
        self.project = project
        self.database = database
        self.collection = collection
        self._client: Optional[firestore.Client] = None

    def _get_client(self) -> firestore.Client:
        """Lazy-load the Firestore client (sync)."""
        if self._client is None:
            kwargs = {"project": self.project}
            if self.database:
                kwargs["database"] = self.database
            self._client = firestore.Client(**kwargs)
        return self._client

    async def get_by_uid(self, uid: str) -> Optional[UserDocument]:
        """Return the first user document with ``uid == uid``, or None."""

        def _query() -> Optional[dict]:
            query = (
                self._get_client()
                .collection(self.collection)
                .where(filter=FieldFilter("uid", "==", uid))
                .limit(1)
            )
            for snapshot in query.stream():
                return snapshot.to_dict()
            return None

        try:
            data = await asyncio.to_thread(_query)
        except Exception as e:
            raise ExternalServiceError("firestore", f"Failed to query users by uid: {e}") from e

        if data is None:
            logger.debug(f"No user document with uid '{uid}' in '{self.collection}'")
            return None
        return UserDocument.model_validate(data)
