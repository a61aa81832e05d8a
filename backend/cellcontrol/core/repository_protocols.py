"""Boundary Protocols — capability contracts between layers.

Invariants:
    - Callers depend on capabilities, never on a concrete store technology
    - Implementations are passed in by constructor (no lookup, no globals)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: every implementation does IO
    - Errors raised, not returned: a failed call raises DatabaseError
"""

from typing import Protocol, Sequence

from cellcontrol.models.user import User


class UserRepository(Protocol):
    """Contract for user persistence — insert one, list all."""
    async def create(self, user: User) -> None: ...
    async def list_all(self) -> Sequence[User]: ...


class UserServiceLike(Protocol):
    """Contract for the user business layer consumed by the HTTP handler."""
    async def create_user(
        self, nombre: str, apellido: str, email: str, reparto: str,
    ) -> None: ...
    async def list_users(self) -> Sequence[User]: ...
