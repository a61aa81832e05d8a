"""User Repository — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - create() issues exactly one INSERT and commits it
    - list_all() is an unfiltered, unordered SELECT; empty table → empty list
    - Errors come from DatabaseSessionManager.session() as DatabaseError, unchanged

Design Decisions:
    - One AsyncSession per call: no state shared between concurrent requests
    - No business logic: values are persisted exactly as the service built them
"""

from typing import Sequence

from sqlalchemy import select

from cellcontrol.infrastructure.database import DatabaseSessionManager
from cellcontrol.models.user import User


class SqlAlchemyUserRepository:
    """Store-backed users repository."""

    def __init__(self, store: DatabaseSessionManager):
        self._store = store

    async def create(self, user: User) -> None:
        """Insert one row; populates id and timestamps on the instance."""
        async with self._store.session() as db:
            db.add(user)
            await db.commit()
            await db.refresh(user)

    async def list_all(self) -> Sequence[User]:
        async with self._store.session() as db:
            result = await db.execute(select(User))
            return list(result.scalars().all())
