"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/store.py
============================================================
Class: InMemoryStore

Responsibilities:
  - Ser la "base de datos" compartida por los repositorios in-memory
    (users / accounts / user_accounts / transactions).
  - Emular lo que Postgres resuelve por FK: cascadas al borrar cuentas/usuarios.
  - Proveer helpers de listado alineados con Postgres:
      filtros (contains ILIKE / gte / eq) + ORDER BY created_at DESC, id DESC
      + LIMIT/OFFSET.

Collaborators:
  - domain.filters.Filter / FilterOp
  - in_memory/{user,account,user_account,transaction}.py

Constraints:
  - Thread-safe: acceso protegido por Lock (los repos no hacen await bajo lock).
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import Any, Dict, Iterable, List, Sequence, Set, Tuple, TypeVar
from uuid import UUID

from ....crosscutting.pagination import offset_for
from ....domain.entities import Account, Transaction, User
from ....domain.filters import Filter, FilterOp

E = TypeVar("E", User, Account, Transaction)


class InMemoryStore:
    def __init__(self) -> None:
        self.lock = Lock()
        self.users: Dict[UUID, User] = {}
        # Cuentas se guardan SIN usuarios; se hidratan en lectura.
        self.accounts: Dict[UUID, Account] = {}
        self.user_accounts: Set[Tuple[UUID, UUID]] = set()
        self.transactions: Dict[UUID, Transaction] = {}

    def users_of(self, account_id: UUID) -> Tuple[User, ...]:
        linked = [
            self.users[user_id]
            for user_id, acc_id in self.user_accounts
            if acc_id == account_id and user_id in self.users
        ]
        return tuple(sorted(linked, key=lambda u: (u.created_at, str(u.id))))

    def cascade_account(self, account_id: UUID) -> None:
        self.user_accounts = {
            pair for pair in self.user_accounts if pair[1] != account_id
        }
        for tx_id in [
            t.id for t in self.transactions.values() if t.account_id == account_id
        ]:
            del self.transactions[tx_id]

    def cascade_user(self, user_id: UUID) -> None:
        self.user_accounts = {
            pair for pair in self.user_accounts if pair[0] != user_id
        }


# ============================================================
# Helpers de listado
# ============================================================
def _matches(entity: Any, condition: Filter) -> bool:
    actual = getattr(entity, condition.field, None)
    if condition.op == FilterOp.CONTAINS:
        return actual is not None and str(condition.value).lower() in str(actual).lower()
    if condition.op == FilterOp.GTE:
        return actual is not None and actual >= condition.value
    return actual == condition.value


def select_page(
    items: Iterable[E], *, page: int, limit: int, filters: Sequence[Filter]
) -> tuple[List[E], int]:
    """Filtra, ordena (created_at DESC, id DESC) y recorta una página."""
    matched = [e for e in items if all(_matches(e, f) for f in filters)]
    matched.sort(key=lambda e: (e.created_at, str(e.id)), reverse=True)
    start = offset_for(page, limit)
    return matched[start : start + limit], len(matched)
