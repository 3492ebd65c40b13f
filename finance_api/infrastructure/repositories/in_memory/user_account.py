from __future__ import annotations

from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from .store import InMemoryStore


class InMemoryUserAccountRepository:
    """Vínculos usuario-cuenta (emula las FKs y la PK compuesta de Postgres)."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def create(self, *, user_id: UUID, account_id: UUID) -> None:
        with self._store.lock:
            if user_id not in self._store.users:
                raise DatabaseError(f"user_accounts: unknown user {user_id}")
            if account_id not in self._store.accounts:
                raise DatabaseError(f"user_accounts: unknown account {account_id}")
            if (user_id, account_id) in self._store.user_accounts:
                raise DatabaseError("user_accounts: duplicate link")
            self._store.user_accounts.add((user_id, account_id))
