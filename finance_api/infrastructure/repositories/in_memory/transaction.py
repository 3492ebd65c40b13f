from __future__ import annotations

from typing import List, Optional, Sequence
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import Transaction
from ....domain.filters import Filter
from .store import InMemoryStore, select_page


class InMemoryTransactionRepository:
    """TransactionRepository sobre InMemoryStore (FK a accounts emulada)."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def create(self, transaction: Transaction) -> Transaction:
        with self._store.lock:
            if transaction.account_id not in self._store.accounts:
                raise DatabaseError(
                    f"transactions: unknown account {transaction.account_id}"
                )
            self._store.transactions[transaction.id] = transaction
        return transaction

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        with self._store.lock:
            return self._store.transactions.get(transaction_id)

    async def find_all(self) -> List[Transaction]:
        with self._store.lock:
            items, _ = select_page(
                self._store.transactions.values(),
                page=1,
                limit=max(1, len(self._store.transactions)),
                filters=(),
            )
            return items

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[List[Transaction], int]:
        with self._store.lock:
            return select_page(
                self._store.transactions.values(),
                page=page,
                limit=limit,
                filters=filters,
            )

    async def update(self, transaction: Transaction) -> Transaction:
        with self._store.lock:
            if transaction.id not in self._store.transactions:
                raise DatabaseError(
                    f"transaction not found for update: {transaction.id}"
                )
            self._store.transactions[transaction.id] = transaction
        return transaction

    async def delete(self, transaction_id: UUID) -> Optional[Transaction]:
        with self._store.lock:
            return self._store.transactions.pop(transaction_id, None)
