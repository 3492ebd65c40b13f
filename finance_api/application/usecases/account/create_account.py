"""
===============================================================================
USE CASE: Create Account
===============================================================================

Business Goal:
    Crear una cuenta compartida y vincularla a uno o más usuarios.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    CreateAccountUseCase

Responsibilities:
    - Resolver cada usuario en orden; el primero inexistente corta con
      NOT_FOUND("usuário") ANTES de persistir nada.
    - Persistir la fila de la cuenta.
    - Crear los vínculos usuario-cuenta en paralelo (asyncio.gather) y
      esperar a todos.

Collaborators:
    - UserRepository: find_by_id
    - AccountRepository: create
    - UserAccountRepository: create(user_id, account_id)

Fallas parciales:
    - Si un vínculo falla, la excepción llega a UseCase.run (UnknownError).
      La cuenta y los vínculos ya escritos quedan persistidos (sin compensación).
===============================================================================
"""

from __future__ import annotations

import asyncio
from typing import Sequence
from uuid import UUID

from ....domain.either import Either, right, wrong
from ....domain.entities import Account, User
from ....domain.errors import DomainError, not_found_error
from ....domain.repositories import (
    AccountRepository,
    UserAccountRepository,
    UserRepository,
)
from ..base import UseCase
from .dtos import AccountOutput, CreateAccountInput
from .mapper import to_account_output


class CreateAccountUseCase(UseCase[CreateAccountInput, AccountOutput]):
    schema = CreateAccountInput

    def __init__(
        self,
        accounts: AccountRepository,
        users: UserRepository,
        user_accounts: UserAccountRepository,
    ) -> None:
        self._accounts = accounts
        self._users = users
        self._user_accounts = user_accounts

    async def execute(
        self, data: CreateAccountInput
    ) -> Either[DomainError, AccountOutput]:
        # ---------------------------------------------------------------------
        # 1) Resolver usuarios (secuencial, corta en el primer faltante)
        # ---------------------------------------------------------------------
        # R: ids repetidos se vinculan una sola vez (PK compuesta en user_accounts).
        user_ids = list(dict.fromkeys(data.users_ids))
        users: list[User] = []
        for user_id in user_ids:
            user = await self._users.find_by_id(user_id)
            if user is None:
                return wrong(not_found_error("usuário", "id", user_id))
            users.append(user)

        # ---------------------------------------------------------------------
        # 2) Persistir la cuenta
        # ---------------------------------------------------------------------
        account = Account(name=data.name, users=tuple(users))
        await self._accounts.create(account)

        # ---------------------------------------------------------------------
        # 3) Vínculos en paralelo
        # ---------------------------------------------------------------------
        await self._link_users(user_ids, account.id)

        return right(to_account_output(account))

    async def _link_users(self, user_ids: Sequence[UUID], account_id: UUID) -> None:
        await asyncio.gather(
            *(
                self._user_accounts.create(user_id=user_id, account_id=account_id)
                for user_id in user_ids
            )
        )
