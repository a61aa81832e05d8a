"""User Service — normalization before persistence, errors propagate unchanged.

Invariants:
    - Stored values are trimmed; email also lower-cased
    - Repository errors reach the caller as the same exception object
    - list_users returns exactly what the repository returns
"""

import pytest

from cellcontrol.core.errors import DatabaseError
from cellcontrol.infrastructure.user_repository import SqlAlchemyUserRepository
from cellcontrol.services.user_service import UserService
from tests.fakes import BrokenUserRepository, InMemoryUserRepository


async def test_create_user_normalizes_fields():
    repo = InMemoryUserRepository()
    service = UserService(repo)

    await service.create_user("  Juan  ", "Pérez", "  JUAN@EXAMPLE.COM ", "  IT  ")

    [user] = repo.users
    assert user.nombre == "Juan"
    assert user.apellido == "Pérez"
    assert user.email == "juan@example.com"
    assert user.reparto == "IT"


async def test_create_user_leaves_id_and_timestamps_to_the_store():
    captured = []

    class _CapturingRepository(InMemoryUserRepository):
        async def create(self, user):
            captured.append((user.id, user.created_at, user.updated_at))
            await super().create(user)

    service = UserService(_CapturingRepository())
    await service.create_user("Ana", "Gómez", "ana@example.com", "Ventas")

    assert captured == [(None, None, None)]


async def test_repository_error_propagates_unchanged():
    original = DatabaseError("Connection or operational error", "execute")

    class _Failing(InMemoryUserRepository):
        async def create(self, user):
            raise original

    service = UserService(_Failing())
    with pytest.raises(DatabaseError) as exc_info:
        await service.create_user("Ana", "Gómez", "ana@example.com", "Ventas")
    assert exc_info.value is original


async def test_list_users_delegates():
    repo = InMemoryUserRepository()
    service = UserService(repo)
    await service.create_user("Ana", "Gómez", "ana@example.com", "Ventas")
    await service.create_user("Luis", "Díaz", "luis@example.com", "IT")

    users = await service.list_users()
    assert [u.email for u in users] == ["ana@example.com", "luis@example.com"]


async def test_list_users_empty():
    assert await UserService(InMemoryUserRepository()).list_users() == []


async def test_list_users_error_propagates():
    with pytest.raises(DatabaseError):
        await UserService(BrokenUserRepository()).list_users()


async def test_case_and_padding_variant_email_rejected_by_store(test_store):
    service = UserService(SqlAlchemyUserRepository(test_store))
    await service.create_user("Juan", "Pérez", "juan@example.com", "IT")

    with pytest.raises(DatabaseError) as exc_info:
        await service.create_user("Juan", "Pérez", "  JUAN@Example.com  ", "IT")
    assert exc_info.value.operation == "commit"

    users = await service.list_users()
    assert len(users) == 1
