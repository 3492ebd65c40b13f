"""
Unit tests for the in-memory repositories (same contract as Postgres).

Tests:
  - Deterministic ordering: created_at DESC, id DESC
  - Filters: contains (case-insensitive) / gte / eq
  - FK emulation on user_accounts and cascades on delete
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from finance_api.crosscutting.exceptions import DatabaseError
from finance_api.domain.entities import Account, Transaction, User
from finance_api.domain.filters import Filter, FilterOp
from finance_api.infrastructure.repositories.in_memory import (
    InMemoryAccountRepository,
    InMemoryStore,
    InMemoryTransactionRepository,
    InMemoryUserAccountRepository,
    InMemoryUserRepository,
)

pytestmark = pytest.mark.unit

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _user(name: str, offset_days: int = 0) -> User:
    at = T0 + timedelta(days=offset_days)
    return User(
        name=name,
        email=f"{name.lower()}@example.com",
        password="hash",
        cpf="52998224725",
        created_at=at,
        updated_at=at,
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


class TestUsers:
    async def test_newest_first_and_paged(self, store):
        repo = InMemoryUserRepository(store)
        for i, name in enumerate(["Ana", "Bruno", "Carla"]):
            await repo.create(_user(name, offset_days=i))

        first, total = await repo.find_where(page=1, limit=2)
        second, _ = await repo.find_where(page=2, limit=2)

        assert total == 3
        assert [u.name for u in first] == ["Carla", "Bruno"]
        assert [u.name for u in second] == ["Ana"]

    async def test_filters(self, store):
        repo = InMemoryUserRepository(store)
        for i, name in enumerate(["Ana", "Mariana", "Bruno"]):
            await repo.create(_user(name, offset_days=i))

        by_name, total = await repo.find_where(
            page=1, limit=10, filters=[Filter("name", FilterOp.CONTAINS, "ANA")]
        )
        assert total == 2
        assert {u.name for u in by_name} == {"Ana", "Mariana"}

        recent, total = await repo.find_where(
            page=1,
            limit=10,
            filters=[Filter("created_at", FilterOp.GTE, T0 + timedelta(days=1))],
        )
        assert total == 2
        assert {u.name for u in recent} == {"Mariana", "Bruno"}

    async def test_duplicate_email_raises(self, store):
        repo = InMemoryUserRepository(store)
        await repo.create(_user("Ana"))
        with pytest.raises(DatabaseError):
            await repo.create(_user("Ana"))

    async def test_delete_missing_returns_none(self, store):
        assert await InMemoryUserRepository(store).delete(uuid4()) is None


class TestLinksAndCascades:
    async def test_link_requires_existing_rows(self, store):
        links = InMemoryUserAccountRepository(store)
        with pytest.raises(DatabaseError):
            await links.create(user_id=uuid4(), account_id=uuid4())

    async def test_account_reads_are_hydrated(self, store):
        users = InMemoryUserRepository(store)
        accounts = InMemoryAccountRepository(store)
        links = InMemoryUserAccountRepository(store)
        ana = _user("Ana")
        await users.create(ana)
        account = Account(name="Casa")
        await accounts.create(account)
        await links.create(user_id=ana.id, account_id=account.id)

        fetched = await accounts.find_by_id(account.id)

        assert [u.id for u in fetched.users] == [ana.id]
        with pytest.raises(DatabaseError):
            await links.create(user_id=ana.id, account_id=account.id)

    async def test_deleting_user_removes_links(self, store):
        users = InMemoryUserRepository(store)
        accounts = InMemoryAccountRepository(store)
        ana = _user("Ana")
        await users.create(ana)
        account = Account(name="Casa")
        await accounts.create(account)
        await InMemoryUserAccountRepository(store).create(
            user_id=ana.id, account_id=account.id
        )

        await users.delete(ana.id)

        assert (await accounts.find_by_id(account.id)).users == ()

    async def test_deleting_account_removes_transactions(self, store):
        accounts = InMemoryAccountRepository(store)
        transactions = InMemoryTransactionRepository(store)
        account = Account(name="Casa")
        await accounts.create(account)
        tx = Transaction(amount=1, account_id=account.id)
        await transactions.create(tx)

        await accounts.delete(account.id)

        assert await transactions.find_by_id(tx.id) is None
