from .create_transaction import CreateTransactionUseCase
from .delete_transaction import DeleteTransactionUseCase
from .dtos import TransactionOutput
from .get_transaction import GetTransactionUseCase
from .list_transactions import ListTransactionsUseCase
from .update_transaction import UpdateTransactionUseCase

__all__ = [
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetTransactionUseCase",
    "ListTransactionsUseCase",
    "TransactionOutput",
    "UpdateTransactionUseCase",
]
