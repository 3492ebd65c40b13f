from __future__ import annotations

from ....domain.entities import Transaction
from ....domain.value_objects import format_currency
from .dtos import TransactionOutput


def to_transaction_output(transaction: Transaction) -> TransactionOutput:
    return TransactionOutput(
        id=transaction.id,
        amount=format_currency(transaction.amount),
        description=transaction.description,
        account_id=transaction.account_id,
        created_at=transaction.created_at,
        updated_at=transaction.updated_at,
    )
