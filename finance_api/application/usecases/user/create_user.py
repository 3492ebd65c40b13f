"""
===============================================================================
USE CASE: Create User
===============================================================================

Business Goal:
    Registrar un usuario garantizando:
      - email único
      - contraseña que cumple la política (validada en el schema)
      - CPF con dígito verificador válido (validado en el schema)
      - la contraseña se persiste SOLO como hash

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    CreateUserUseCase

Responsibilities:
    - Verificar unicidad de email.
    - Hashear la contraseña ANTES de construir la entidad.
    - Persistir y devolver UserOutput (sin password).

Collaborators:
    - UserRepository: find_by_email, create
    - PasswordHasher: hash

Error Mapping:
    - ALREADY_EXISTS: email ya registrado
===============================================================================
"""

from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.entities import User
from ....domain.errors import DomainError, already_exists_error
from ....domain.repositories import UserRepository
from ....domain.services import PasswordHasher
from ..base import UseCase
from .dtos import CreateUserInput, UserOutput
from .mapper import to_user_output


class CreateUserUseCase(UseCase[CreateUserInput, UserOutput]):
    schema = CreateUserInput

    def __init__(self, users: UserRepository, hasher: PasswordHasher) -> None:
        self._users = users
        self._hasher = hasher

    async def execute(self, data: CreateUserInput) -> Either[DomainError, UserOutput]:
        # 1) Unicidad de email
        if await self._users.find_by_email(data.email) is not None:
            return wrong(already_exists_error("usuário", "email"))

        # 2) Hash antes de construir la entidad
        password_hash = await self._hasher.hash(data.password)

        # 3) Persistir
        user = User(
            name=data.name,
            email=data.email,
            password=password_hash,
            cpf=data.cpf,
        )
        created = await self._users.create(user)

        return right(to_user_output(created))
