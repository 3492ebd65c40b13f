"""
USE CASE: Refresh Token

Verifica el refresh token y emite un access token nuevo para el mismo
usuario. El refresh token se devuelve SIN cambios (no hay rotación).

Cualquier falla de verificación (expirado, malformado, firma inválida, tipo
de token incorrecto, sin user id) -> INVALID_TOKEN.
"""

from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError, invalid_refresh_token_error
from ....domain.services import TokenService
from ..base import UseCase
from .dtos import RefreshTokenInput, TokensOutput


class RefreshTokenUseCase(UseCase[RefreshTokenInput, TokensOutput]):
    schema = RefreshTokenInput

    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    async def execute(
        self, data: RefreshTokenInput
    ) -> Either[DomainError, TokensOutput]:
        payload = self._tokens.verify_refresh_token(data.refresh_token)
        if payload is None:
            return wrong(invalid_refresh_token_error())

        return right(
            TokensOutput(
                access_token=self._tokens.issue_access_token(
                    payload.user_id, admin=payload.admin
                ),
                refresh_token=data.refresh_token,
            )
        )
