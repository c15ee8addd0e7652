"""Fake user repository for testing."""

from typing import Optional

from oshub.schemas import UserDocument


class FakeUserRepository:
    """In-memory fake for UserRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize empty in-memory store."""
        self._by_uid: dict[str, UserDocument] = {}
        self._error: Optional[Exception] = None
        self._calls: list[tuple] = []

    def seed(self, user: UserDocument) -> None:
        """Store a user document keyed by its uid."""
        assert user.uid, "seeded users need a uid"
        self._by_uid[user.uid] = user

    def fail_with(self, error: Exception) -> None:
        """Make every subsequent lookup raise *error*."""
        self._error = error

    def call_count(self, method: str) -> int:
        """Return the number of times a method was called."""
        return sum(1 for name, *_ in self._calls if name == method)

    async def get_by_uid(self, uid: str) -> Optional[UserDocument]:
        """Return the seeded user with this uid, or None."""
        self._calls.append(("get_by_uid", uid))
        if self._error is not None:
            raise self._error
        return self._by_uid.get(uid)
