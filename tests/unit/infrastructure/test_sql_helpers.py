"""
Unit tests for postgres/_sql.py (no database needed).

Tests:
  - build_where: ILIKE with escaped wildcards, >=, =, whitelist enforcement
  - translate_errors: any exception -> DatabaseError (original kept)
  - Repositories fail with DatabaseError when the pool is not open
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from finance_api.crosscutting.exceptions import DatabaseError
from finance_api.domain.filters import Filter, FilterOp
from finance_api.infrastructure.db.pool import Database
from finance_api.infrastructure.db.errors import PoolNotOpenError
from finance_api.infrastructure.repositories.postgres import PostgresUserRepository
from finance_api.infrastructure.repositories.postgres._sql import (
    build_where,
    translate_errors,
)

pytestmark = pytest.mark.unit

COLUMNS = {"name": "name", "created_at": "created_at", "account_id": "account_id"}


class TestBuildWhere:
    def test_no_filters(self):
        assert build_where([], COLUMNS) == ("", [])

    def test_operators(self):
        since = datetime(2024, 1, 1, tzinfo=timezone.utc)
        account_id = uuid4()

        where, params = build_where(
            [
                Filter("name", FilterOp.CONTAINS, "casa"),
                Filter("created_at", FilterOp.GTE, since),
                Filter("account_id", FilterOp.EQ, account_id),
            ],
            COLUMNS,
        )

        assert where == "WHERE name ILIKE %s AND created_at >= %s AND account_id = %s"
        assert params == ["%casa%", since, account_id]

    def test_like_wildcards_are_escaped(self):
        _, params = build_where([Filter("name", FilterOp.CONTAINS, "50%_off")], COLUMNS)
        assert params == ["%50\\%\\_off%"]

    def test_unknown_field_is_rejected(self):
        with pytest.raises(ValueError):
            build_where([Filter("password", FilterOp.EQ, "x")], COLUMNS)


class TestTranslateErrors:
    async def test_wraps_unexpected_errors(self):
        original = RuntimeError("boom")
        with pytest.raises(DatabaseError) as exc_info:
            async with translate_errors("query failed", {"table": "users"}):
                raise original

        assert exc_info.value.original_error is original
        assert "query failed" in exc_info.value.message

    async def test_database_error_passes_through(self):
        error = DatabaseError("already translated")
        with pytest.raises(DatabaseError) as exc_info:
            async with translate_errors("query failed", {}):
                raise error
        assert exc_info.value is error


class TestDatabaseHandle:
    async def test_connection_requires_open_pool(self):
        db = Database("postgresql://u:p@localhost:5432/db")
        with pytest.raises(PoolNotOpenError):
            async with db.connection():
                pass

    async def test_close_is_idempotent(self):
        db = Database("postgresql://u:p@localhost:5432/db")
        await db.close()
        await db.close()

    async def test_repository_surfaces_database_error(self):
        repo = PostgresUserRepository(Database("postgresql://u:p@localhost:5432/db"))
        with pytest.raises(DatabaseError) as exc_info:
            await repo.find_by_id(uuid4())
        assert isinstance(exc_info.value.original_error, PoolNotOpenError)
