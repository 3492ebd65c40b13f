"""
USE CASE: Update Transaction

- Misma regla de pertenencia que Get/Delete (cuenta existe + transacción suya).
- Solo se aplican los campos PRESENTES en el input: `description: null`
  explícito limpia la descripción; ausente la deja como estaba.
- updated_at se refresca siempre.
"""

from __future__ import annotations

from typing import Any

from ....domain.either import Either, right
from ....domain.errors import DomainError
from ....domain.repositories import AccountRepository, TransactionRepository
from ..base import UseCase
from .dtos import TransactionOutput, UpdateTransactionInput
from .mapper import to_transaction_output
from .ownership import find_owned_transaction


class UpdateTransactionUseCase(UseCase[UpdateTransactionInput, TransactionOutput]):
    schema = UpdateTransactionInput

    def __init__(
        self, transactions: TransactionRepository, accounts: AccountRepository
    ) -> None:
        self._transactions = transactions
        self._accounts = accounts

    async def execute(
        self, data: UpdateTransactionInput
    ) -> Either[DomainError, TransactionOutput]:
        found = await find_owned_transaction(
            self._accounts,
            self._transactions,
            transaction_id=data.id,
            account_id=data.account_id,
        )
        if found.is_wrong():
            return found

        updated = await self._transactions.update(
            found.value.with_changes(**self._changes(data))
        )
        return right(to_transaction_output(updated))

    @staticmethod
    def _changes(data: UpdateTransactionInput) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        if data.amount is not None:
            changes["amount"] = data.amount
        if "description" in data.model_fields_set:
            changes["description"] = data.description
        return changes
