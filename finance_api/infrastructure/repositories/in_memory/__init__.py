"""
In-memory implementations: tests unitarios rápidos y dev local
(REPOSITORY_BACKEND=memory). No persisten datos tras reiniciar la app.
"""

from .account import InMemoryAccountRepository
from .store import InMemoryStore
from .transaction import InMemoryTransactionRepository
from .user import InMemoryUserRepository
from .user_account import InMemoryUserAccountRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryStore",
    "InMemoryTransactionRepository",
    "InMemoryUserAccountRepository",
    "InMemoryUserRepository",
]
