"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Responsabilidades:
    - Centralizar exports del dominio para imports limpios en application/interfaces.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .either import Either, Right, Wrong, right, wrong
from .entities import Account, Transaction, User
from .errors import DomainError, ErrorKind
from .filters import Filter, FilterOp, parse_filters
from .repositories import (
    AccountRepository,
    TransactionRepository,
    UserAccountRepository,
    UserRepository,
)

__all__ = [
    "Either",
    "Right",
    "Wrong",
    "right",
    "wrong",
    "Account",
    "Transaction",
    "User",
    "DomainError",
    "ErrorKind",
    "Filter",
    "FilterOp",
    "parse_filters",
    "AccountRepository",
    "TransactionRepository",
    "UserAccountRepository",
    "UserRepository",
]
