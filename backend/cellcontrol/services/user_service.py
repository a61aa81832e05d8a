"""User Service — normalizes input and delegates persistence to the repository.

Invariants:
    - nombre, apellido, reparto trimmed; email trimmed and lower-cased
    - New users carry no id or timestamps (the store assigns them)
    - Repository errors propagate unchanged (no wrapping, no translation)
    - list_users applies no filtering or ordering

Design Decisions:
    - Normalization lives here, not in the handler: applies to every caller
    - Format/required validation stays at the HTTP boundary
"""

import logging
from typing import Sequence

from cellcontrol.core.normalize import normalize_user_fields
from cellcontrol.core.repository_protocols import UserRepository
from cellcontrol.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Business layer for users."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def create_user(
        self, nombre: str, apellido: str, email: str, reparto: str,
    ) -> None:
        user = User(**normalize_user_fields(nombre, apellido, email, reparto))
        await self._repository.create(user)
        logger.info(f"User created: {user.email}")

    async def list_users(self) -> Sequence[User]:
        return await self._repository.list_all()
