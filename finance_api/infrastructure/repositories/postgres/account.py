"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/account.py
============================================================
Class: PostgresAccountRepository

Responsibilities:
  - Implementar AccountRepository sobre `accounts`.
  - Hidratar `users` de cada cuenta leída (JOIN user_accounts -> users)
    en la misma conexión que la lectura principal.
  - create/update escriben SOLO la fila de la cuenta.

Collaborators:
  - infrastructure.db.pool.Database
  - postgres/_sql.py, postgres/user.py (mapping de filas de usuario)
============================================================
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from psycopg import AsyncConnection

from ....domain.entities import Account, User
from ....domain.filters import Filter
from ...db.pool import Database
from ....crosscutting.pagination import offset_for
from ._sql import build_where, fetchone, translate_errors
from .user import _USER_COLUMNS, _row_to_user

_ACCOUNT_COLUMNS = "id, name, created_at, updated_at"
_ACCOUNT_ORDER_BY = "created_at DESC, id DESC"

_ACCOUNT_FILTER_COLUMNS = {
    "name": "name",
    "created_at": "created_at",
    "updated_at": "updated_at",
}

_LINKED_USER_COLUMNS = ", ".join(f"u.{c.strip()}" for c in _USER_COLUMNS.split(","))


def _row_to_account(row: tuple, users: Tuple[User, ...] = ()) -> Account:
    return Account(
        id=row[0],
        name=row[1],
        created_at=row[2],
        updated_at=row[3],
        users=users,
    )


async def _load_users(
    conn: AsyncConnection, account_ids: Sequence[UUID]
) -> Dict[UUID, Tuple[User, ...]]:
    if not account_ids:
        return {}
    cur = await conn.execute(
        f"""
            SELECT ua.account_id, {_LINKED_USER_COLUMNS}
            FROM user_accounts ua
            JOIN users u ON u.id = ua.user_id
            WHERE ua.account_id = ANY(%s)
            ORDER BY u.created_at ASC, u.id ASC
        """,
        (list(account_ids),),
    )
    grouped: Dict[UUID, List[User]] = {}
    for row in await cur.fetchall():
        grouped.setdefault(row[0], []).append(_row_to_user(row[1:]))
    return {account_id: tuple(users) for account_id, users in grouped.items()}


class PostgresAccountRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def create(self, account: Account) -> Account:
        await fetchone(
            self._db,
            query=f"""
                INSERT INTO accounts ({_ACCOUNT_COLUMNS})
                VALUES (%s, %s, %s, %s)
                RETURNING id
            """,
            params=(account.id, account.name, account.created_at, account.updated_at),
            log_msg="PostgresAccountRepository: create failed",
            log_extra={"account_id": str(account.id)},
        )
        return account

    async def find_by_id(self, account_id: UUID) -> Optional[Account]:
        async with translate_errors(
            "PostgresAccountRepository: find_by_id failed",
            {"account_id": str(account_id)},
        ):
            async with self._db.connection() as conn:
                cur = await conn.execute(
                    f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE id = %s",
                    (account_id,),
                )
                row = await cur.fetchone()
                if row is None:
                    return None
                users = await _load_users(conn, [row[0]])
        return _row_to_account(row, users.get(row[0], ()))

    async def find_all(self) -> List[Account]:
        async with translate_errors("PostgresAccountRepository: find_all failed", {}):
            async with self._db.connection() as conn:
                cur = await conn.execute(
                    f"SELECT {_ACCOUNT_COLUMNS} FROM accounts ORDER BY {_ACCOUNT_ORDER_BY}"
                )
                rows = await cur.fetchall()
                users = await _load_users(conn, [r[0] for r in rows])
        return [_row_to_account(r, users.get(r[0], ())) for r in rows]

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[List[Account], int]:
        where, params = build_where(filters, _ACCOUNT_FILTER_COLUMNS)
        async with translate_errors(
            "PostgresAccountRepository: find_where failed",
            {"page": page, "limit": limit},
        ):
            async with self._db.connection() as conn:
                cur = await conn.execute(
                    f"""
                        SELECT {_ACCOUNT_COLUMNS}
                        FROM accounts
                        {where}
                        ORDER BY {_ACCOUNT_ORDER_BY}
                        LIMIT %s OFFSET %s
                    """,
                    (*params, limit, offset_for(page, limit)),
                )
                rows = await cur.fetchall()
                cur = await conn.execute(
                    f"SELECT COUNT(*) FROM accounts {where}", tuple(params)
                )
                count_row = await cur.fetchone()
                users = await _load_users(conn, [r[0] for r in rows])

        accounts = [_row_to_account(r, users.get(r[0], ())) for r in rows]
        return accounts, int(count_row[0]) if count_row else 0

    async def update(self, account: Account) -> Account:
        await fetchone(
            self._db,
            query="""
                UPDATE accounts SET name = %s, updated_at = %s
                WHERE id = %s
                RETURNING id
            """,
            params=(account.name, account.updated_at, account.id),
            log_msg="PostgresAccountRepository: update failed",
            log_extra={"account_id": str(account.id)},
        )
        return account

    async def delete(self, account_id: UUID) -> Optional[Account]:
        # R: se lee antes de borrar para devolver la cuenta con sus usuarios
        #    (la cascada elimina los vínculos).
        account = await self.find_by_id(account_id)
        if account is None:
            return None
        await fetchone(
            self._db,
            query="DELETE FROM accounts WHERE id = %s RETURNING id",
            params=(account_id,),
            log_msg="PostgresAccountRepository: delete failed",
            log_extra={"account_id": str(account_id)},
        )
        return account
