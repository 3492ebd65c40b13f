"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/_sql.py
============================================================
Módulo: helpers SQL compartidos por los repositorios Postgres

Responsibilities:
  - Centralizar logging + raise DatabaseError ante cualquier falla de DB.
  - Ejecutar SELECT fetchone/fetchall y comandos con una conexión del pool.
  - Traducir filtros de dominio (contains / gte / eq) a WHERE parametrizado.
  - Paginación: página + COUNT(*) en la MISMA conexión.

Collaborators:
  - infrastructure.db.pool.Database
  - domain.filters.Filter / FilterOp
  - crosscutting.exceptions.DatabaseError, crosscutting.logger

Constraints:
  - SQL parametrizado siempre; los nombres de columna salen de un
    whitelist (field -> column), nunca del input.
============================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable, Mapping, Sequence

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....crosscutting.pagination import offset_for
from ....domain.filters import Filter, FilterOp
from ...db.pool import Database


@asynccontextmanager
async def translate_errors(
    log_msg: str, log_extra: Mapping[str, object]
) -> AsyncIterator[None]:
    """Cualquier excepción dentro del bloque -> log + DatabaseError."""
    try:
        yield
    except DatabaseError:
        raise
    except Exception as exc:
        logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
        raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc


async def fetchone(
    db: Database,
    *,
    query: str,
    params: Iterable[object],
    log_msg: str,
    log_extra: Mapping[str, object],
) -> tuple | None:
    async with translate_errors(log_msg, log_extra):
        async with db.connection() as conn:
            cur = await conn.execute(query, tuple(params))
            return await cur.fetchone()


async def fetchall(
    db: Database,
    *,
    query: str,
    params: Iterable[object] = (),
    log_msg: str,
    log_extra: Mapping[str, object],
) -> list[tuple]:
    async with translate_errors(log_msg, log_extra):
        async with db.connection() as conn:
            cur = await conn.execute(query, tuple(params))
            return await cur.fetchall()


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_where(
    filters: Sequence[Filter], columns: Mapping[str, str]
) -> tuple[str, list[object]]:
    """
    Filtros -> ("WHERE ...", params). Sin filtros -> ("", []).

    Raises:
        ValueError: si un filtro apunta a un campo fuera del whitelist.
    """
    clauses: list[str] = []
    params: list[object] = []
    for condition in filters:
        column = columns.get(condition.field)
        if column is None:
            raise ValueError(f"Unsupported filter field: {condition.field}")
        if condition.op == FilterOp.CONTAINS:
            clauses.append(f"{column} ILIKE %s")
            params.append(f"%{_escape_like(str(condition.value))}%")
        elif condition.op == FilterOp.GTE:
            clauses.append(f"{column} >= %s")
            params.append(condition.value)
        else:
            clauses.append(f"{column} = %s")
            params.append(condition.value)

    if not clauses:
        return "", []
    return "WHERE " + " AND ".join(clauses), params


async def fetch_page(
    db: Database,
    *,
    table: str,
    select_columns: str,
    order_by: str,
    filters: Sequence[Filter],
    columns: Mapping[str, str],
    page: int,
    limit: int,
    log_msg: str,
) -> tuple[list[tuple], int]:
    """Página + total filtrado en una sola conexión."""
    where, params = build_where(filters, columns)
    async with translate_errors(log_msg, {"page": page, "limit": limit}):
        async with db.connection() as conn:
            cur = await conn.execute(
                f"""
                    SELECT {select_columns}
                    FROM {table}
                    {where}
                    ORDER BY {order_by}
                    LIMIT %s OFFSET %s
                """,
                (*params, limit, offset_for(page, limit)),
            )
            rows = await cur.fetchall()

            cur = await conn.execute(
                f"SELECT COUNT(*) FROM {table} {where}", tuple(params)
            )
            count_row = await cur.fetchone()

    return rows, int(count_row[0]) if count_row else 0
