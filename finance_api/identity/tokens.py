"""
===============================================================================
TARJETA CRC — identity/tokens.py
===============================================================================

Módulo:
    Tokens JWT (access / refresh)

Responsabilidades:
    - Emitir JWT HS256 con payload {"user": {"id", "admin"}, "typ", "iat", "exp", "jti"}.
    - Verificar firma, expiración, tipo de token y claims mínimos.
    - Devolver None ante CUALQUIER falla (el caller decide el error de negocio).

Colaboradores:
    - crosscutting.config.get_settings: secreto y TTLs.
    - domain.services.TokenService / TokenPayload.
    - identity/auth.py: verifica access tokens en el borde HTTP.
    - application/usecases/session: emite y verifica refresh tokens.

Decisiones:
    - typ separa access de refresh: un refresh no sirve como bearer y viceversa.
    - jti aleatorio: dos tokens emitidos en el mismo segundo nunca coinciden.
    - No loguear tokens; solo el motivo del rechazo.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from ..crosscutting.logger import logger
from ..domain.services import TokenPayload

JWT_ALGORITHM: str = "HS256"

CLAIM_USER: str = "user"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_TYP: str = "typ"
CLAIM_JTI: str = "jti"

TOKEN_TYPE_ACCESS: str = "access"
TOKEN_TYPE_REFRESH: str = "refresh"


class JWTTokenService:
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      JWTTokenService

    Responsabilidades:
      - Firmar access (TTL corto) y refresh (TTL largo) tokens
      - Validarlos devolviendo TokenPayload | None

    Colaboradores:
      - PyJWT
    ----------------------------------------------------------------------------
    """

    def __init__(
        self,
        secret: str,
        *,
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(days=7),
    ) -> None:
        self._secret = secret
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl

    @classmethod
    def from_settings(cls, settings) -> "JWTTokenService":
        return cls(
            settings.jwt_secret,
            access_ttl=timedelta(minutes=settings.jwt_access_ttl_minutes),
            refresh_ttl=timedelta(days=settings.jwt_refresh_ttl_days),
        )

    # -----------------------------------------------------------------------
    # Emisión
    # -----------------------------------------------------------------------

    def issue_access_token(self, user_id: UUID, *, admin: bool = False) -> str:
        return self._sign(user_id, admin, TOKEN_TYPE_ACCESS, self._access_ttl)

    def issue_refresh_token(self, user_id: UUID, *, admin: bool = False) -> str:
        return self._sign(user_id, admin, TOKEN_TYPE_REFRESH, self._refresh_ttl)

    def _sign(self, user_id: UUID, admin: bool, token_type: str, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload: dict[str, object] = {
            CLAIM_USER: {"id": str(user_id), "admin": bool(admin)},
            CLAIM_TYP: token_type,
            CLAIM_IAT: int(now.timestamp()),
            CLAIM_EXP: int((now + ttl).timestamp()),
            CLAIM_JTI: uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    # -----------------------------------------------------------------------
    # Verificación
    # -----------------------------------------------------------------------

    def verify_access_token(self, token: str) -> TokenPayload | None:
        return self._verify(token, TOKEN_TYPE_ACCESS)

    def verify_refresh_token(self, token: str) -> TokenPayload | None:
        return self._verify(token, TOKEN_TYPE_REFRESH)

    def _verify(self, token: str, expected_type: str) -> TokenPayload | None:
        if not token:
            return None

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": [CLAIM_USER, CLAIM_EXP, CLAIM_TYP]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Token rechazado: expirado", extra={"typ": expected_type})
            return None
        except jwt.InvalidTokenError as exc:
            logger.info(
                "Token rechazado: inválido",
                extra={"typ": expected_type, "reason": type(exc).__name__},
            )
            return None

        if payload.get(CLAIM_TYP) != expected_type:
            return None

        user = payload.get(CLAIM_USER)
        if not isinstance(user, dict) or not user.get("id"):
            return None

        try:
            user_id = UUID(str(user["id"]))
        except ValueError:
            return None

        return TokenPayload(user_id=user_id, admin=bool(user.get("admin", False)))
