"""
===============================================================================
TARJETA CRC — domain/services.py
===============================================================================

Módulo:
    Puertos de Servicios Externos (Protocols)

Responsabilidades:
    - Definir contratos para hashing de contraseñas y emisión/verificación de tokens.
    - Mantener el dominio independiente de argon2 / PyJWT.

Colaboradores:
    - identity/passwords.py, identity/tokens.py: implementaciones concretas.
    - application/usecases (user, session): consumen estos puertos.

Reglas:
    - SOLO interfaces: nada de implementación.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


class PasswordHasher(Protocol):
    """Contrato de hashing (operaciones CPU-bound: se ejecutan fuera del loop)."""

    async def hash(self, password: str) -> str: ...

    async def verify(self, password: str, password_hash: str) -> bool: ...


@dataclass(frozen=True)
class TokenPayload:
    """Payload mínimo que esperamos de un token válido."""

    user_id: UUID
    admin: bool = False


class TokenService(Protocol):
    """Contrato de tokens firmados (access de vida corta, refresh de vida larga)."""

    def issue_access_token(self, user_id: UUID, *, admin: bool = False) -> str: ...

    def issue_refresh_token(self, user_id: UUID, *, admin: bool = False) -> str: ...

    def verify_access_token(self, token: str) -> TokenPayload | None: ...

    def verify_refresh_token(self, token: str) -> TokenPayload | None: ...
