from __future__ import annotations

from ....crosscutting.pagination import Paginated, paginate
from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError
from ....domain.repositories import AccountRepository, TransactionRepository
from ..base import UseCase
from .dtos import ListTransactionsInput, TransactionOutput
from .mapper import to_transaction_output
from .ownership import ensure_account_exists


class ListTransactionsUseCase(
    UseCase[ListTransactionsInput, Paginated[TransactionOutput]]
):
    """
    Lista transacciones de UNA cuenta (account_id entra como filtro de igualdad).

    Filtros: description por substring, createdAt/updatedAt >=.
    """

    schema = ListTransactionsInput

    def __init__(
        self, transactions: TransactionRepository, accounts: AccountRepository
    ) -> None:
        self._transactions = transactions
        self._accounts = accounts

    async def execute(
        self, data: ListTransactionsInput
    ) -> Either[DomainError, Paginated[TransactionOutput]]:
        account_error = await ensure_account_exists(self._accounts, data.account_id)
        if account_error is not None:
            return wrong(account_error)

        transactions, total = await self._transactions.find_where(
            page=data.page, limit=data.limit, filters=data.to_filters()
        )
        return right(
            paginate(
                [to_transaction_output(t) for t in transactions],
                page=data.page,
                limit=data.limit,
                total=total,
            )
        )
