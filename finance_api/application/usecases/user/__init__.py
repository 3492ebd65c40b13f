from .change_password import ChangeUserPasswordUseCase
from .create_user import CreateUserUseCase
from .delete_user import DeleteUserUseCase
from .dtos import UserOutput
from .list_users import ListUsersUseCase
from .show_user import ShowUserUseCase
from .update_user import UpdateUserUseCase

__all__ = [
    "ChangeUserPasswordUseCase",
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "ShowUserUseCase",
    "UpdateUserUseCase",
    "UserOutput",
]
