"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Implementar UserRepository con SQL parametrizado sobre `users`.
  - Mapear filas crudas -> entidad de dominio `User`.
  - Exponer fallos consistentes vía `DatabaseError` con logging estructurado.

Collaborators:
  - infrastructure.db.pool.Database (inyectado)
  - postgres/_sql.py (fetchone / fetchall / fetch_page)
  - domain.entities.User

Constraints / Notes:
  - Repositorio puro: NO define reglas de negocio.
  - Retorna None cuando no existe el recurso.
  - Orden estable en listados: created_at DESC, id DESC.
============================================================
"""

from __future__ import annotations

from typing import List, Optional, Sequence
from uuid import UUID

from ....domain.entities import User
from ....domain.filters import Filter
from ...db.pool import Database
from ._sql import fetch_page, fetchall, fetchone

# R: Lista explícita de columnas para mantener el contrato estable con migraciones.
_USER_COLUMNS = "id, name, email, password, cpf, created_at, updated_at"

_USER_ORDER_BY = "created_at DESC, id DESC"

# R: Whitelist de campos filtrables (field de dominio -> columna).
_USER_FILTER_COLUMNS = {
    "name": "name",
    "email": "email",
    "created_at": "created_at",
    "updated_at": "updated_at",
}


def _row_to_user(row: tuple) -> User:
    return User(
        id=row[0],
        name=row[1],
        email=row[2],
        password=row[3],
        cpf=row[4],
        created_at=row[5],
        updated_at=row[6],
    )


class PostgresUserRepository:
    def __init__(self, db: Database) -> None:
        self._db = db

    async def create(self, user: User) -> User:
        row = await fetchone(
            self._db,
            query=f"""
                INSERT INTO users ({_USER_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                RETURNING {_USER_COLUMNS}
            """,
            params=(
                user.id,
                user.name,
                user.email,
                user.password,
                user.cpf,
                user.created_at,
                user.updated_at,
            ),
            log_msg="PostgresUserRepository: create failed",
            log_extra={"user_id": str(user.id)},
        )
        return _row_to_user(row) if row else user

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        row = await fetchone(
            self._db,
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s",
            params=(user_id,),
            log_msg="PostgresUserRepository: find_by_id failed",
            log_extra={"user_id": str(user_id)},
        )
        return _row_to_user(row) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        row = await fetchone(
            self._db,
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s",
            params=(email,),
            log_msg="PostgresUserRepository: find_by_email failed",
            log_extra={"email": email},
        )
        return _row_to_user(row) if row else None

    async def find_all(self) -> List[User]:
        rows = await fetchall(
            self._db,
            query=f"SELECT {_USER_COLUMNS} FROM users ORDER BY {_USER_ORDER_BY}",
            log_msg="PostgresUserRepository: find_all failed",
            log_extra={},
        )
        return [_row_to_user(r) for r in rows]

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[List[User], int]:
        rows, total = await fetch_page(
            self._db,
            table="users",
            select_columns=_USER_COLUMNS,
            order_by=_USER_ORDER_BY,
            filters=filters,
            columns=_USER_FILTER_COLUMNS,
            page=page,
            limit=limit,
            log_msg="PostgresUserRepository: find_where failed",
        )
        return [_row_to_user(r) for r in rows], total

    async def update(self, user: User) -> User:
        row = await fetchone(
            self._db,
            query=f"""
                UPDATE users
                SET name = %s, email = %s, password = %s, cpf = %s, updated_at = %s
                WHERE id = %s
                RETURNING {_USER_COLUMNS}
            """,
            params=(
                user.name,
                user.email,
                user.password,
                user.cpf,
                user.updated_at,
                user.id,
            ),
            log_msg="PostgresUserRepository: update failed",
            log_extra={"user_id": str(user.id)},
        )
        return _row_to_user(row) if row else user

    async def delete(self, user_id: UUID) -> Optional[User]:
        row = await fetchone(
            self._db,
            query=f"DELETE FROM users WHERE id = %s RETURNING {_USER_COLUMNS}",
            params=(user_id,),
            log_msg="PostgresUserRepository: delete failed",
            log_extra={"user_id": str(user_id)},
        )
        return _row_to_user(row) if row else None
