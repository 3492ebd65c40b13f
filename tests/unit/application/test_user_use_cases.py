"""
Unit tests for the user use cases.

Tests:
  - Invalid input -> VALIDATION and the repository is never touched
  - Email uniqueness on create / update
  - Password is stored hashed and never returned
  - Show / delete of unknown ids -> NOT_FOUND naming "usuário"
  - Change password: wrong current password == unknown email
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from finance_api.application.usecases import (
    ChangeUserPasswordUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    ShowUserUseCase,
    UpdateUserUseCase,
)
from finance_api.domain.errors import ErrorKind
from finance_api.domain.repositories import UserRepository

pytestmark = pytest.mark.unit

VALID_CPF = "529.982.247-25"
VALID_PASSWORD = "Senha@123"


def _create_payload(**overrides):
    payload = {
        "name": "Maria Silva",
        "email": "maria@example.com",
        "password": VALID_PASSWORD,
        "cpf": VALID_CPF,
    }
    payload.update(overrides)
    return payload


class TestCreateUser:
    async def test_invalid_input_never_reaches_repository(self, fake_hasher):
        users = AsyncMock(spec=UserRepository)
        use_case = CreateUserUseCase(users, fake_hasher)

        result = await use_case.run(_create_payload(cpf="111.111.111-11"))

        assert result.is_wrong()
        assert result.value.kind == ErrorKind.VALIDATION
        assert "cpf" in result.value.errors
        users.find_by_email.assert_not_called()
        users.create.assert_not_called()

    async def test_creates_with_hashed_password(self, container):
        result = await container.create_user.run(_create_payload())

        assert result.is_right()
        output = result.value
        assert output.email == "maria@example.com"
        assert "password" not in output.model_dump()

        stored = await container.users.find_by_id(output.id)
        assert stored.password == f"hashed::{VALID_PASSWORD}"

    async def test_duplicate_email(self, container):
        await container.create_user.run(_create_payload())
        result = await container.create_user.run(_create_payload(name="Outra"))

        assert result.is_wrong()
        assert result.value.kind == ErrorKind.ALREADY_EXISTS

    async def test_repository_crash_becomes_unknown(self, fake_hasher):
        users = AsyncMock(spec=UserRepository)
        users.find_by_email.side_effect = RuntimeError("connection reset")

        result = await CreateUserUseCase(users, fake_hasher).run(_create_payload())

        assert result.is_wrong()
        assert result.value.kind == ErrorKind.UNKNOWN
        assert result.value.message == "connection reset"


class TestReadUsers:
    async def test_show_unknown_id(self, container):
        missing = uuid4()
        result = await container.show_user.run({"id": str(missing)})

        assert result.is_wrong()
        assert result.value.kind == ErrorKind.NOT_FOUND
        assert "usuário" in result.value.message
        assert str(missing) in result.value.message

    async def test_show_is_idempotent(self, container):
        created = (await container.create_user.run(_create_payload())).value

        first = await container.show_user.run({"id": str(created.id)})
        second = await container.show_user.run({"id": str(created.id)})

        assert first.value == second.value

    async def test_show_rejects_malformed_id(self):
        users = AsyncMock(spec=UserRepository)
        result = await ShowUserUseCase(users).run({"id": "not-a-uuid"})

        assert result.value.kind == ErrorKind.VALIDATION
        users.find_by_id.assert_not_called()

    async def test_list_paginates_with_filter(self, container):
        for i in range(3):
            await container.create_user.run(
                _create_payload(name=f"Ana {i}", email=f"ana{i}@example.com")
            )
        await container.create_user.run(
            _create_payload(name="Bruno", email="bruno@example.com")
        )

        result = await ListUsersUseCase(container.users).run(
            {"name": "ana", "page": 1, "limit": 2}
        )

        page = result.value
        assert page.pagination.total == 3
        assert page.pagination.total_pages == 2
        assert len(page.data) == 2
        assert all("Ana" in u.name for u in page.data)

    async def test_list_empty(self, container):
        page = (await container.list_users.run({})).value
        assert page.data == []
        assert page.pagination.total == 0
        assert page.pagination.total_pages == 0


class TestUpdateAndDelete:
    async def test_partial_update_keeps_other_fields(self, container):
        created = (await container.create_user.run(_create_payload())).value

        result = await UpdateUserUseCase(container.users).run(
            {"id": str(created.id), "name": "Maria S."}
        )

        assert result.value.name == "Maria S."
        assert result.value.email == created.email
        assert result.value.updated_at >= created.updated_at

    async def test_update_to_taken_email(self, container):
        await container.create_user.run(_create_payload())
        other = (
            await container.create_user.run(
                _create_payload(email="joao@example.com", name="João")
            )
        ).value

        result = await container.update_user.run(
            {"id": str(other.id), "email": "maria@example.com"}
        )

        assert result.value.kind == ErrorKind.ALREADY_EXISTS

    async def test_delete_returns_removed_user(self, container):
        created = (await container.create_user.run(_create_payload())).value

        deleted = await DeleteUserUseCase(container.users).run({"id": str(created.id)})
        again = await container.delete_user.run({"id": str(created.id)})

        assert deleted.value.id == created.id
        assert again.value.kind == ErrorKind.NOT_FOUND


class TestChangePassword:
    async def test_changes_password(self, container, fake_hasher):
        await container.create_user.run(_create_payload())
        use_case = ChangeUserPasswordUseCase(container.users, fake_hasher)

        result = await use_case.run(
            {
                "email": "maria@example.com",
                "currentPassword": VALID_PASSWORD,
                "newPassword": "Nova#Senha9",
            }
        )

        assert result.value.message == "Senha atualizada com sucesso"
        stored = await container.users.find_by_email("maria@example.com")
        assert stored.password == "hashed::Nova#Senha9"

    async def test_wrong_current_password_equals_unknown_email(self, container):
        await container.create_user.run(_create_payload())

        wrong_password = await container.change_user_password.run(
            {
                "email": "maria@example.com",
                "currentPassword": "Errada@123",
                "newPassword": "Nova#Senha9",
            }
        )
        unknown_email = await container.change_user_password.run(
            {
                "email": "ninguem@example.com",
                "currentPassword": VALID_PASSWORD,
                "newPassword": "Nova#Senha9",
            }
        )

        assert wrong_password.value == unknown_email.value
        assert wrong_password.value.kind == ErrorKind.AUTH_FAILED

    async def test_password_reaches_hasher_unchanged(self, container):
        result = await container.create_user.run(
            _create_payload(password="  Senha@123  ")
        )

        assert result.is_right()
        stored = await container.users.find_by_email("maria@example.com")
        assert stored.password == "hashed::  Senha@123  "
