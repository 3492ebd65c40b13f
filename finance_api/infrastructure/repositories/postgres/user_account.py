"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/user_account.py
============================================================
Class: PostgresUserAccountRepository

Responsibilities:
  - Persistir el vínculo usuario <-> cuenta (tabla `user_accounts`).

Notes:
  - Las FKs y la PK compuesta las garantiza el esquema (alembic);
    cualquier violación sale como DatabaseError.
============================================================
"""

from __future__ import annotations

from uuid import UUID

from ...db.pool import Database
from ._sql import fetchone


class PostgresUserAccountRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def create(self, *, user_id: UUID, account_id: UUID) -> None:
        await fetchone(
            self._db,
            query="""
                INSERT INTO user_accounts (user_id, account_id)
                VALUES (%s, %s)
                RETURNING user_id
            """,
            params=(user_id, account_id),
            log_msg="PostgresUserAccountRepository: create failed",
            log_extra={"user_id": str(user_id), "account_id": str(account_id)},
        )
