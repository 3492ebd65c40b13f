"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/account.py
============================================================
Class: InMemoryAccountRepository

Responsibilities:
  - Implementar AccountRepository sobre InMemoryStore.
  - Persistir SOLO la fila de la cuenta (sin usuarios).
  - Hidratar `users` en cada lectura desde user_accounts.
  - Cascada de vínculos y transacciones al borrar.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import Account
from ....domain.filters import Filter
from .store import InMemoryStore, select_page


class InMemoryAccountRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _hydrate(self, account: Account) -> Account:
        return replace(account, users=self._store.users_of(account.id))

    async def create(self, account: Account) -> Account:
        with self._store.lock:
            self._store.accounts[account.id] = replace(account, users=())
        return account

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        with self._store.lock:
            account = self._store.accounts.get(account_id)
            return self._hydrate(account) if account else None

    async def find_all(self) -> List[Account]:
        with self._store.lock:
            items, _ = select_page(
                self._store.accounts.values(),
                page=1,
                limit=max(1, len(self._store.accounts)),
                filters=(),
            )
            return [self._hydrate(a) for a in items]

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[List[Account], int]:
        with self._store.lock:
            items, total = select_page(
                self._store.accounts.values(), page=page, limit=limit, filters=filters
            )
            return [self._hydrate(a) for a in items], total

    async def update(self, account: Account) -> Account:
        with self._store.lock:
            if account.id not in self._store.accounts:
                raise DatabaseError(f"account not found for update: {account.id}")
            self._store.accounts[account.id] = replace(account, users=())
        return account

    async def delete(self, account_id: UUID) -> Optional[Account]:
        with self._store.lock:
            account = self._store.accounts.pop(account_id, None)
            if account is None:
                return None
            hydrated = replace(account, users=self._store.users_of(account_id))
            self._store.cascade_account(account_id)
            return hydrated
