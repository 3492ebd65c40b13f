"""
===============================================================================
TARJETA CRC — identity/auth.py
===============================================================================

Módulo:
    Dependencia FastAPI de autenticación bearer

Responsabilidades:
    - Extraer el token desde `Authorization: Bearer <token>`.
    - Validarlo como ACCESS token (firma, exp, typ).
    - Rechazar con 401 {"message": ...}:
        * header ausente        -> "Token não fornecido"
        * token inválido/expirado -> "Token inválido"
    - Publicar el usuario en request.state y en el contexto de logs.

Colaboradores:
    - domain.services.TokenService (inyectado via container).
    - crosscutting.error_responses: missing_token / invalid_token.
    - context.set_user_context.
===============================================================================
"""

from __future__ import annotations

from typing import Callable

from fastapi import Header, Request

from ..context import set_user_context
from ..crosscutting.error_responses import invalid_token, missing_token
from ..domain.services import TokenPayload


def _extract_bearer_token(authorization: str) -> str | None:
    """Extrae token desde `Authorization: Bearer <token>`."""
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


def require_user() -> Callable:
    """Dependency FastAPI: requiere access token válido."""

    async def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> TokenPayload:
        if not authorization:
            raise missing_token()

        token = _extract_bearer_token(authorization)
        if not token:
            raise invalid_token()

        tokens = request.app.state.container.token_service
        payload = tokens.verify_access_token(token)
        if payload is None:
            raise invalid_token()

        request.state.user = payload
        set_user_context(str(payload.user_id))
        return payload

    return dependency
