"""Router raíz de la API: agrupa los routers por recurso bajo /api."""

from fastapi import APIRouter

from .routers import (
    accounts_router,
    session_router,
    transactions_router,
    users_router,
)

API_PREFIX = "/api"


def build_router() -> APIRouter:
    router = APIRouter(prefix=API_PREFIX)
    router.include_router(session_router)
    router.include_router(users_router)
    router.include_router(accounts_router)
    router.include_router(transactions_router)
    return router
