from .errors import DatabasePoolError, PoolAlreadyOpenError, PoolNotOpenError
from .pool import Database

__all__ = ["Database", "DatabasePoolError", "PoolAlreadyOpenError", "PoolNotOpenError"]
