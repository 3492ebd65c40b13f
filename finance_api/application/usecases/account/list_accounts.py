from __future__ import annotations

from ....crosscutting.pagination import Paginated, paginate
from ....domain.either import Either, right
from ....domain.errors import DomainError
from ....domain.repositories import AccountRepository
from ..base import UseCase
from .dtos import AccountOutput, ListAccountsInput
from .mapper import to_account_output


class ListAccountsUseCase(UseCase[ListAccountsInput, Paginated[AccountOutput]]):
    """Lista cuentas (con usuarios) paginadas; filtro por nombre y fechas."""

    schema = ListAccountsInput

    def __init__(self, accounts: AccountRepository) -> None:
        self._accounts = accounts

    async def execute(
        self, data: ListAccountsInput
    ) -> Either[DomainError, Paginated[AccountOutput]]:
        accounts, total = await self._accounts.find_where(
            page=data.page, limit=data.limit, filters=data.to_filters()
        )
        return right(
            paginate(
                [to_account_output(account) for account in accounts],
                page=data.page,
                limit=data.limit,
                total=total,
            )
        )
