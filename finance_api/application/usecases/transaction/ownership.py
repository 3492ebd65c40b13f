"""
Resolución compartida "cuenta existe + transacción pertenece a la cuenta".

Una transacción de OTRA cuenta es indistinguible de una inexistente:
ambas devuelven NOT_FOUND("transação").
"""

from __future__ import annotations

from uuid import UUID

from ....domain.either import Either, right, wrong
from ....domain.entities import Transaction
from ....domain.errors import DomainError, not_found_error
from ....domain.repositories import AccountRepository, TransactionRepository


async def ensure_account_exists(
    accounts: AccountRepository, account_id: UUID
) -> DomainError | None:
    if await accounts.find_by_id(account_id) is None:
        return not_found_error("conta", "id", account_id)
    return None


async def find_owned_transaction(
    accounts: AccountRepository,
    transactions: TransactionRepository,
    *,
    transaction_id: UUID,
    account_id: UUID,
) -> Either[DomainError, Transaction]:
    account_error = await ensure_account_exists(accounts, account_id)
    if account_error is not None:
        return wrong(account_error)

    transaction = await transactions.find_by_id(transaction_id)
    if transaction is None or not transaction.belongs_to(account_id):
        return wrong(not_found_error("transação", "id", transaction_id))

    return right(transaction)
