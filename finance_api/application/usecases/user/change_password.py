"""
===============================================================================
USE CASE: Change User Password
===============================================================================

Business Goal:
    Cambiar la contraseña de un usuario que demuestra conocer la actual.

Seguridad:
    - Email inexistente y contraseña actual incorrecta producen el MISMO error
      (AUTH_FAILED): no se revela cuál de los dos falló.
    - La nueva contraseña cumple la política (validada en el schema) y se
      persiste solo como hash.

Output:
    {"message": "Senha atualizada com sucesso"}
===============================================================================
"""

from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError, email_or_password_wrong_error
from ....domain.repositories import UserRepository
from ....domain.services import PasswordHasher
from ..base import UseCase
from .dtos import ChangeUserPasswordInput, MessageOutput

PASSWORD_UPDATED_MESSAGE = "Senha atualizada com sucesso"


class ChangeUserPasswordUseCase(UseCase[ChangeUserPasswordInput, MessageOutput]):
    schema = ChangeUserPasswordInput

    def __init__(self, users: UserRepository, hasher: PasswordHasher) -> None:
        self._users = users
        self._hasher = hasher

    async def execute(
        self, data: ChangeUserPasswordInput
    ) -> Either[DomainError, MessageOutput]:
        user = await self._users.find_by_email(data.email)
        if user is None:
            return wrong(email_or_password_wrong_error())

        if not await self._hasher.verify(data.current_password, user.password):
            return wrong(email_or_password_wrong_error())

        password_hash = await self._hasher.hash(data.new_password)
        await self._users.update(user.with_changes(password=password_hash))

        return right(MessageOutput(message=PASSWORD_UPDATED_MESSAGE))
