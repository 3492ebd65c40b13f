"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Implementar UserRepository sobre InMemoryStore (tests / dev local).
  - Replicar la unicidad de email que Postgres impone por constraint.
  - Cascada de vínculos user_accounts al borrar.
============================================================
"""

from __future__ import annotations

from typing import List, Optional, Sequence
from uuid import UUID

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import User
from ....domain.filters import Filter
from .store import InMemoryStore, select_page


class InMemoryUserRepository:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def create(self, user: User) -> User:
        with self._store.lock:
            if any(u.email == user.email for u in self._store.users.values()):
                raise DatabaseError(f"duplicate email: {user.email}")
            self._store.users[user.id] = user
        return user

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        with self._store.lock:
            return self._store.users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        with self._store.lock:
            return next(
                (u for u in self._store.users.values() if u.email == email), None
            )

    async def find_all(self) -> List[User]:
        with self._store.lock:
            items, _ = select_page(
                self._store.users.values(),
                page=1,
                limit=max(1, len(self._store.users)),
                filters=(),
            )
            return items

    async def find_where(
        self, *, page: int, limit: int, filters: Sequence[Filter] = ()
    ) -> tuple[List[User], int]:
        with self._store.lock:
            return select_page(
                self._store.users.values(), page=page, limit=limit, filters=filters
            )

    async def update(self, user: User) -> User:
        with self._store.lock:
            if user.id not in self._store.users:
                raise DatabaseError(f"user not found for update: {user.id}")
            self._store.users[user.id] = user
        return user

    async def delete(self, user_id: UUID) -> Optional[User]:
        with self._store.lock:
            removed = self._store.users.pop(user_id, None)
            if removed is not None:
                self._store.cascade_user(user_id)
            return removed
