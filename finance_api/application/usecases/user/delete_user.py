from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError, not_found_error
from ....domain.repositories import UserRepository
from ..base import UseCase
from .dtos import DeleteUserInput, UserOutput
from .mapper import to_user_output


class DeleteUserUseCase(UseCase[DeleteUserInput, UserOutput]):
    """Elimina un usuario y devuelve el registro eliminado."""

    schema = DeleteUserInput

    def __init__(self, users: UserRepository) -> None:
        self._users = users

    async def execute(self, data: DeleteUserInput) -> Either[DomainError, UserOutput]:
        user = await self._users.find_by_id(data.id)
        if user is None:
            return wrong(not_found_error("usuário", "id", data.id))

        await self._users.delete(user.id)
        return right(to_user_output(user))
