"""
Implementaciones Postgres (psycopg 3 + psycopg_pool).
Requieren un `Database` abierto (lo abre el lifespan de la API).
"""

from .account import PostgresAccountRepository
from .transaction import PostgresTransactionRepository
from .user import PostgresUserRepository
from .user_account import PostgresUserAccountRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresTransactionRepository",
    "PostgresUserAccountRepository",
    "PostgresUserRepository",
]
