from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError, not_found_error
from ....domain.repositories import AccountRepository
from ..base import UseCase
from .dtos import AccountOutput, GetAccountInput
from .mapper import to_account_output


class GetAccountUseCase(UseCase[GetAccountInput, AccountOutput]):
    schema = GetAccountInput

    def __init__(self, accounts: AccountRepository) -> None:
        self._accounts = accounts

    async def execute(self, data: GetAccountInput) -> Either[DomainError, AccountOutput]:
        account = await self._accounts.find_by_id(data.id)
        if account is None:
            return wrong(not_found_error("conta", "id", data.id))
        return right(to_account_output(account))
