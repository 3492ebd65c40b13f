from .create_account import CreateAccountUseCase
from .delete_account import DeleteAccountUseCase
from .dtos import AccountOutput
from .get_account import GetAccountUseCase
from .list_accounts import ListAccountsUseCase
from .update_account import UpdateAccountUseCase

__all__ = [
    "AccountOutput",
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "GetAccountUseCase",
    "ListAccountsUseCase",
    "UpdateAccountUseCase",
]
