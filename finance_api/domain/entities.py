"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (User, Account, Transaction)

Responsabilidades:
    - Definir estructuras centrales del negocio (sin infraestructura).
    - Inmutabilidad: "modificar" produce una nueva instancia con updated_at fresco.
    - Mantener tipos claros para casos de uso y repositorios.

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases: construyen/consumen estas entidades.
    - application/usecases/*/mapper.py: DTOs de salida.

Principios:
    - Sin dependencias a DB/FastAPI.
    - User.password es SIEMPRE un hash (nunca texto plano).
    - Transaction.amount es un entero escalado x10^4 (ver value_objects).
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Optional, Tuple
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    """Fecha/hora UTC (helper interno)."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    name: str
    email: str
    password: str
    cpf: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def with_changes(self, **changes: Any) -> "User":
        return replace(self, **changes, updated_at=_utcnow())


@dataclass(frozen=True)
class Account:
    """
    Cuenta compartida.

    users: usuarios vinculados (via user_accounts). Puede estar vacío.
    """

    name: str
    users: Tuple[User, ...] = ()
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def with_changes(self, **changes: Any) -> "Account":
        return replace(self, **changes, updated_at=_utcnow())


@dataclass(frozen=True)
class Transaction:
    """
    Movimiento libre asociado a una cuenta (sin balance ni ledger).
    """

    amount: int
    account_id: UUID
    description: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def with_changes(self, **changes: Any) -> "Transaction":
        return replace(self, **changes, updated_at=_utcnow())

    def belongs_to(self, account_id: UUID) -> bool:
        return self.account_id == account_id
