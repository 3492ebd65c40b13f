"""
===============================================================================
USE CASE: Create Transaction
===============================================================================

Business Goal:
    Registrar un movimiento (monto + descripción opcional) en una cuenta.

Reglas:
    - amount > 0, a lo sumo 4 decimales (validado y escalado en el schema).
    - La cuenta debe existir (NOT_FOUND("conta")).
    - Sin control de saldo: las transacciones son registros independientes.

Output:
    TransactionOutput con amount "5000.0000" y description null si no vino.
===============================================================================
"""

from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.entities import Transaction
from ....domain.errors import DomainError
from ....domain.repositories import AccountRepository, TransactionRepository
from ..base import UseCase
from .dtos import CreateTransactionInput, TransactionOutput
from .mapper import to_transaction_output
from .ownership import ensure_account_exists


class CreateTransactionUseCase(UseCase[CreateTransactionInput, TransactionOutput]):
    schema = CreateTransactionInput

    def __init__(
        self, transactions: TransactionRepository, accounts: AccountRepository
    ) -> None:
        self._transactions = transactions
        self._accounts = accounts

    async def execute(
        self, data: CreateTransactionInput
    ) -> Either[DomainError, TransactionOutput]:
        account_error = await ensure_account_exists(self._accounts, data.account_id)
        if account_error is not None:
            return wrong(account_error)

        transaction = Transaction(
            amount=data.amount,
            account_id=data.account_id,
            description=data.description,
        )
        created = await self._transactions.create(transaction)

        return right(to_transaction_output(created))
