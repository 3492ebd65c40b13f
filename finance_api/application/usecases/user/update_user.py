"""
===============================================================================
USE CASE: Update User
===============================================================================

Business Goal:
    Actualizar datos de perfil (name, email, cpf) de un usuario existente.

Reglas:
    - El usuario debe existir (NOT_FOUND).
    - Si cambia el email, no puede pertenecer a OTRO usuario (ALREADY_EXISTS).
    - La contraseña NO se cambia acá (ver ChangeUserPasswordUseCase).
    - Campos ausentes quedan como estaban; updated_at se refresca.
===============================================================================
"""

from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError, already_exists_error, not_found_error
from ....domain.repositories import UserRepository
from ..base import UseCase
from .dtos import UpdateUserInput, UserOutput
from .mapper import to_user_output

_PROFILE_FIELDS = ("name", "email", "cpf")


class UpdateUserUseCase(UseCase[UpdateUserInput, UserOutput]):
    schema = UpdateUserInput

    def __init__(self, users: UserRepository) -> None:
        self._users = users

    async def execute(self, data: UpdateUserInput) -> Either[DomainError, UserOutput]:
        # ---------------------------------------------------------------------
        # 1) Existencia
        # ---------------------------------------------------------------------
        user = await self._users.find_by_id(data.id)
        if user is None:
            return wrong(not_found_error("usuário", "id", data.id))

        # ---------------------------------------------------------------------
        # 2) Disponibilidad del email (solo si cambia)
        # ---------------------------------------------------------------------
        if data.email is not None and data.email != user.email:
            owner = await self._users.find_by_email(data.email)
            if owner is not None and owner.id != user.id:
                return wrong(already_exists_error("usuário", "email"))

        # ---------------------------------------------------------------------
        # 3) Aplicar cambios y persistir
        # ---------------------------------------------------------------------
        changes = {
            name: getattr(data, name)
            for name in _PROFILE_FIELDS
            if getattr(data, name) is not None
        }
        updated = await self._users.update(user.with_changes(**changes))

        return right(to_user_output(updated))
