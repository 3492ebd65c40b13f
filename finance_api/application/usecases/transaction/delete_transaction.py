from __future__ import annotations

from ....domain.either import Either, right
from ....domain.errors import DomainError
from ....domain.repositories import AccountRepository, TransactionRepository
from ..base import UseCase
from .dtos import DeleteTransactionInput, TransactionOutput
from .mapper import to_transaction_output
from .ownership import find_owned_transaction


class DeleteTransactionUseCase(UseCase[DeleteTransactionInput, TransactionOutput]):
    """Elimina una transacción de la cuenta indicada y la devuelve."""

    schema = DeleteTransactionInput

    def __init__(
        self, transactions: TransactionRepository, accounts: AccountRepository
    ) -> None:
        self._transactions = transactions
        self._accounts = accounts

    async def execute(
        self, data: DeleteTransactionInput
    ) -> Either[DomainError, TransactionOutput]:
        found = await find_owned_transaction(
            self._accounts,
            self._transactions,
            transaction_id=data.id,
            account_id=data.account_id,
        )
        if found.is_wrong():
            return found

        await self._transactions.delete(found.value.id)
        return right(to_transaction_output(found.value))
