"""
===============================================================================
USE CASE: Login
===============================================================================

Business Goal:
    Intercambiar credenciales por un par de tokens (access + refresh).

Seguridad:
    - Email inexistente y contraseña incorrecta son INDISTINGUIBLES:
      mismo kind (AUTH_FAILED), mismo mensaje, mismo slug.
    - Ambos tokens llevan el id del usuario; access con TTL corto, refresh largo.

Collaborators:
    - UserRepository: find_by_email
    - PasswordHasher: verify
    - TokenService: issue_access_token / issue_refresh_token
===============================================================================
"""

from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError, email_or_password_wrong_error
from ....domain.repositories import UserRepository
from ....domain.services import PasswordHasher, TokenService
from ..base import UseCase
from .dtos import LoginInput, TokensOutput


class LoginUseCase(UseCase[LoginInput, TokensOutput]):
    schema = LoginInput

    def __init__(
        self, users: UserRepository, hasher: PasswordHasher, tokens: TokenService
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def execute(self, data: LoginInput) -> Either[DomainError, TokensOutput]:
        user = await self._users.find_by_email(data.email)
        if user is None:
            return wrong(email_or_password_wrong_error())

        if not await self._hasher.verify(data.password, user.password):
            return wrong(email_or_password_wrong_error())

        return right(
            TokensOutput(
                access_token=self._tokens.issue_access_token(user.id),
                refresh_token=self._tokens.issue_refresh_token(user.id),
            )
        )
