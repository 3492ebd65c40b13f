"""
===============================================================================
TARJETA CRC — domain/repositories.py
===============================================================================

Módulo:
    Puertos de persistencia (Protocols)

Responsabilidades:
    - Definir el contrato genérico de repositorio:
        create / find_by_id / find_all / find_where / update / delete
    - Desacoplar casos de uso de Postgres (Dependency Inversion).

Colaboradores:
    - application/usecases/*: dependen SOLO de estos puertos.
    - infrastructure/repositories/postgres/*: implementación real (psycopg async).
    - infrastructure/repositories/in_memory/*: implementación para tests/dev.

Contrato:
    - find_* devuelve None cuando no existe (no excepción por "not found").
    - find_where(page, limit, filters) -> (items de la página, total filtrado).
    - Orden estable en listados: created_at DESC, id DESC.
    - Fallas de infraestructura se lanzan (DatabaseError); el caso de uso las
      convierte en UnknownError.
===============================================================================
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence
from uuid import UUID

from .entities import Account, Transaction, User
from .filters import Filter


class UserRepository(Protocol):
    async def create(self, user: User) -> User: ...

    async def find_by_id(self, user_id: UUID) -> Optional[User]: ...

    async def find_by_email(self, email: str) -> Optional[User]: ...

    async def find_all(self) -> list[User]: ...

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[list[User], int]: ...

    async def update(self, user: User) -> User: ...

    async def delete(self, user_id: UUID) -> Optional[User]: ...


class AccountRepository(Protocol):
    """
    Las lecturas devuelven la cuenta con sus usuarios cargados.
    create/update persisten solo la fila de la cuenta (los vínculos van por
    UserAccountRepository).
    """

    async def create(self, account: Account) -> Account: ...

    async def find_by_id(self, account_id: UUID) -> Optional[Account]: ...

    async def find_all(self) -> list[Account]: ...

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[list[Account], int]: ...

    async def update(self, account: Account) -> Account: ...

    async def delete(self, account_id: UUID) -> Optional[Account]: ...


class UserAccountRepository(Protocol):
    async def create(self, *, user_id: UUID, account_id: UUID) -> None: ...


class TransactionRepository(Protocol):
    async def create(self, transaction: Transaction) -> Transaction: ...

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]: ...

    async def find_all(self) -> list[Transaction]: ...

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[list[Transaction], int]: ...

    async def update(self, transaction: Transaction) -> Transaction: ...

    async def delete(self, transaction_id: UUID) -> Optional[Transaction]: ...
