"""
===============================================================================
CRC CARD — infrastructure/db/pool.py
===============================================================================

Componente:
  Database (handle explícito sobre psycopg_pool.AsyncConnectionPool)

Responsabilidades:
  - Abrir / cerrar el pool de conexiones async (lo hace el lifespan de FastAPI).
  - Configurar cada conexión nueva (statement_timeout).
  - Entregar conexiones a los repositorios Postgres.

Colaboradores:
  - psycopg_pool.AsyncConnectionPool
  - api/main.py (lifespan: open/close, guarda el handle en app.state)
  - container.py (pasa el handle a los repositorios)

Principios:
  - Sin singleton global: el handle se construye y se inyecta.
  - Fail-fast: doble open o uso sin open lanzan errores tipados.
===============================================================================
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from ...crosscutting.logger import logger
from .errors import PoolAlreadyOpenError, PoolNotOpenError


def _normalize_conninfo(database_url: str) -> str:
    # libpq acepta postgresql:// y postgres://; alembic/sqlalchemy usan +psycopg.
    return database_url.replace("postgresql+psycopg://", "postgresql://", 1)


class Database:
    def __init__(
        self,
        database_url: str,
        *,
        min_size: int = 1,
        max_size: int = 10,
        statement_timeout_ms: int = 0,
    ) -> None:
        self._conninfo = _normalize_conninfo(database_url)
        self._min_size = min_size
        self._max_size = max_size
        self._statement_timeout_ms = statement_timeout_ms
        self._pool: Optional[AsyncConnectionPool] = None

    @classmethod
    def from_settings(cls, settings) -> "Database":
        return cls(
            settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            statement_timeout_ms=settings.db_statement_timeout_ms,
        )

    async def _configure_connection(self, conn: AsyncConnection) -> None:
        # Guardrail contra queries colgadas
        if self._statement_timeout_ms > 0:
            await conn.execute(f"SET statement_timeout = {int(self._statement_timeout_ms)}")
            await conn.commit()

    async def open(self) -> None:
        if self._pool is not None:
            raise PoolAlreadyOpenError("El pool ya fue abierto.")

        logger.info(
            "Abriendo pool DB",
            extra={"min_size": self._min_size, "max_size": self._max_size},
        )
        pool = AsyncConnectionPool(
            conninfo=self._conninfo,
            min_size=self._min_size,
            max_size=self._max_size,
            configure=self._configure_connection,
            open=False,
        )
        await pool.open(wait=True)
        self._pool = pool
        logger.info("Pool DB abierto")

    async def close(self) -> None:
        """Cierra el pool (idempotente)."""
        if self._pool is None:
            return
        logger.info("Cerrando pool DB")
        try:
            await self._pool.close()
        finally:
            self._pool = None
        logger.info("Pool DB cerrado")

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection]:
        if self._pool is None:
            raise PoolNotOpenError("Pool no abierto. Llamar Database.open() primero.")
        async with self._pool.connection() as conn:
            yield conn
