"""Protocol for looking up user documents."""

from typing import Optional, Protocol, runtime_checkable

from oshub.schemas import UserDocument


@runtime_checkable
class UserRepositoryProtocol(Protocol):
    """Read-only access to the ``users`` collection."""

    async def get_by_uid(self, uid: str) -> Optional[UserDocument]:
        """Return the first user document whose ``uid`` equals *uid*.

        Returns None when nothing matches. Raises ExternalServiceError
        when the document store cannot be reached.
        """
        ...
