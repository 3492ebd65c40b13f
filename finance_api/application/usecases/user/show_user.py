from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError, not_found_error
from ....domain.repositories import UserRepository
from ..base import UseCase
from .dtos import ShowUserInput, UserOutput
from .mapper import to_user_output


class ShowUserUseCase(UseCase[ShowUserInput, UserOutput]):
    """Obtiene un usuario por id (solo lectura)."""

    schema = ShowUserInput

    def __init__(self, users: UserRepository) -> None:
        self._users = users

    async def execute(self, data: ShowUserInput) -> Either[DomainError, UserOutput]:
        user = await self._users.find_by_id(data.id)
        if user is None:
            return wrong(not_found_error("usuário", "id", data.id))
        return right(to_user_output(user))
