"""
===============================================================================
TARJETA CRC — application/usecases/__init__.py
===============================================================================

Responsabilidades:
    - Exponer los casos de uso por bounded context (user, account,
      transaction, session) en un único punto de importación.

Colaboradores:
    - container.py (composición)
    - interfaces/api/http/routers/* (vía container)
===============================================================================
"""

from .account import (
    CreateAccountUseCase,
    DeleteAccountUseCase,
    GetAccountUseCase,
    ListAccountsUseCase,
    UpdateAccountUseCase,
)
from .base import Runnable, UseCase
from .session import LoginUseCase, RefreshTokenUseCase
from .transaction import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionUseCase,
    ListTransactionsUseCase,
    UpdateTransactionUseCase,
)
from .user import (
    ChangeUserPasswordUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    ShowUserUseCase,
    UpdateUserUseCase,
)

__all__ = [
    "Runnable",
    "UseCase",
    # Accounts
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "GetAccountUseCase",
    "ListAccountsUseCase",
    "UpdateAccountUseCase",
    # Session
    "LoginUseCase",
    "RefreshTokenUseCase",
    # Transactions
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetTransactionUseCase",
    "ListTransactionsUseCase",
    "UpdateTransactionUseCase",
    # Users
    "ChangeUserPasswordUseCase",
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "ShowUserUseCase",
    "UpdateUserUseCase",
]
