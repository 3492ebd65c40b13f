from __future__ import annotations

from ....domain.either import Either, right, wrong
from ....domain.errors import DomainError, not_found_error
from ....domain.repositories import AccountRepository
from ..base import UseCase
from .dtos import AccountOutput, DeleteAccountInput
from .mapper import to_account_output


class DeleteAccountUseCase(UseCase[DeleteAccountInput, AccountOutput]):
    """Elimina la cuenta (vínculos y transacciones caen en cascada)."""

    schema = DeleteAccountInput

    def __init__(self, accounts: AccountRepository) -> None:
        self._accounts = accounts

    async def execute(
        self, data: DeleteAccountInput
    ) -> Either[DomainError, AccountOutput]:
        account = await self._accounts.find_by_id(data.id)
        if account is None:
            return wrong(not_found_error("conta", "id", data.id))

        await self._accounts.delete(account.id)
        return right(to_account_output(account))
