"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/transaction.py
============================================================
Class: PostgresTransactionRepository

Responsibilities:
  - Implementar TransactionRepository sobre `transactions`.
  - `amount` viaja como BIGINT escalado (x10^4); el formateo es del mapper.

Collaborators:
  - infrastructure.db.pool.Database
  - postgres/_sql.py
============================================================
"""

from __future__ import annotations

from typing import List, Optional, Sequence
from uuid import UUID

from ....domain.entities import Transaction
from ....domain.filters import Filter
from ...db.pool import Database
from ._sql import fetch_page, fetchall, fetchone

_TRANSACTION_COLUMNS = "id, amount, description, account_id, created_at, updated_at"
_TRANSACTION_ORDER_BY = "created_at DESC, id DESC"

_TRANSACTION_FILTER_COLUMNS = {
    "account_id": "account_id",
    "description": "description",
    "created_at": "created_at",
    "updated_at": "updated_at",
}


def _row_to_transaction(row: tuple) -> Transaction:
    return Transaction(
        id=row[0],
        amount=int(row[1]),
        description=row[2],
        account_id=row[3],
        created_at=row[4],
        updated_at=row[5],
    )


class PostgresTransactionRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def create(self, transaction: Transaction) -> Transaction:
        row = await fetchone(
            self._db,
            query=f"""
                INSERT INTO transactions ({_TRANSACTION_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s)
                RETURNING {_TRANSACTION_COLUMNS}
            """,
            params=(
                transaction.id,
                transaction.amount,
                transaction.description,
                transaction.account_id,
                transaction.created_at,
                transaction.updated_at,
            ),
            log_msg="PostgresTransactionRepository: create failed",
            log_extra={
                "transaction_id": str(transaction.id),
                "account_id": str(transaction.account_id),
            },
        )
        return _row_to_transaction(row) if row else transaction

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        row = await fetchone(
            self._db,
            query=f"SELECT {_TRANSACTION_COLUMNS} FROM transactions WHERE id = %s",
            params=(transaction_id,),
            log_msg="PostgresTransactionRepository: find_by_id failed",
            log_extra={"transaction_id": str(transaction_id)},
        )
        return _row_to_transaction(row) if row else None

    async def find_all(self) -> List[Transaction]:
        rows = await fetchall(
            self._db,
            query=(
                f"SELECT {_TRANSACTION_COLUMNS} FROM transactions "
                f"ORDER BY {_TRANSACTION_ORDER_BY}"
            ),
            log_msg="PostgresTransactionRepository: find_all failed",
            log_extra={},
        )
        return [_row_to_transaction(r) for r in rows]

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[List[Transaction], int]:
        rows, total = await fetch_page(
            self._db,
            table="transactions",
            select_columns=_TRANSACTION_COLUMNS,
            order_by=_TRANSACTION_ORDER_BY,
            filters=filters,
            columns=_TRANSACTION_FILTER_COLUMNS,
            page=page,
            limit=limit,
            log_msg="PostgresTransactionRepository: find_where failed",
        )
        return [_row_to_transaction(r) for r in rows], total

    async def update(self, transaction: Transaction) -> Transaction:
        row = await fetchone(
            self._db,
            query=f"""
                UPDATE transactions
                SET amount = %s, description = %s, updated_at = %s
                WHERE id = %s
                RETURNING {_TRANSACTION_COLUMNS}
            """,
            params=(
                transaction.amount,
                transaction.description,
                transaction.updated_at,
                transaction.id,
            ),
            log_msg="PostgresTransactionRepository: update failed",
            log_extra={"transaction_id": str(transaction.id)},
        )
        return _row_to_transaction(row) if row else transaction

    async def delete(self, transaction_id: UUID) -> Optional[Transaction]:
        row = await fetchone(
            self._db,
            query=(
                f"DELETE FROM transactions WHERE id = %s "
                f"RETURNING {_TRANSACTION_COLUMNS}"
            ),
            params=(transaction_id,),
            log_msg="PostgresTransactionRepository: delete failed",
            log_extra={"transaction_id": str(transaction_id)},
        )
        return _row_to_transaction(row) if row else None
