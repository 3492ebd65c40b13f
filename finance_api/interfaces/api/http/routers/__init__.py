from .accounts import router as accounts_router
from .session import router as session_router
from .transactions import router as transactions_router
from .users import router as users_router

__all__ = [
    "accounts_router",
    "session_router",
    "transactions_router",
    "users_router",
]
