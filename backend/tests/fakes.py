"""Test doubles for the repository and service protocols."""

from datetime import datetime, timezone

from cellcontrol.core.errors import DatabaseError
from cellcontrol.models.user import User


class InMemoryUserRepository:
    """UserRepository kept in a list; enforces the unique email like the store."""

    def __init__(self):
        self.users: list[User] = []

    async def create(self, user: User) -> None:
        if any(u.email == user.email for u in self.users):
            raise DatabaseError("Integrity constraint violated", "commit")
        now = datetime.now(timezone.utc)
        user.id = len(self.users) + 1
        user.created_at = now
        user.updated_at = now
        self.users.append(user)

    async def list_all(self) -> list[User]:
        return list(self.users)


class BrokenUserRepository:
    """UserRepository whose store is unreachable."""

    async def create(self, user: User) -> None:
        raise DatabaseError("Connection or operational error", "execute")

    async def list_all(self) -> list[User]:
        raise DatabaseError("Connection or operational error", "execute")


class RecordingUserService:
    """UserServiceLike that records calls and can be told to fail."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[tuple[str, str, str, str]] = []

    async def create_user(self, nombre, apellido, email, reparto) -> None:
        if self.error:
            raise self.error
        self.calls.append((nombre, apellido, email, reparto))

    async def list_users(self) -> list[User]:
        if self.error:
            raise self.error
        return []
