"""
Rutas de transacciones anidadas bajo una cuenta (todas con access token):

    POST   /account/{accountId}/transaction        -> 201
    GET    /account/{accountId}/transaction        -> paginado
    GET    /account/{accountId}/transaction/{id}
    PUT    /account/{accountId}/transaction/{id}
    DELETE /account/{accountId}/transaction/{id}

El accountId del path siempre pisa cualquier accountId del body.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .....container import Container
from .....identity.auth import require_user
from ..controller import Controller
from ..dependencies import get_container, query_input, read_json_body

router = APIRouter(
    prefix="/account/{account_id}/transaction",
    tags=["transactions"],
    dependencies=[Depends(require_user())],
)


@router.post("")
async def create_transaction(
    account_id: str, request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.create_transaction, success_status=201).handle(
        {**body, "accountId": account_id}
    )


@router.get("")
async def list_transactions(
    account_id: str, request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    return await Controller(container.list_transactions).handle(
        query_input(request, accountId=account_id)
    )


@router.get("/{transaction_id}")
async def get_transaction(
    account_id: str,
    transaction_id: str,
    container: Container = Depends(get_container),
) -> JSONResponse:
    return await Controller(container.get_transaction).handle(
        {"id": transaction_id, "accountId": account_id}
    )


@router.put("/{transaction_id}")
async def update_transaction(
    account_id: str,
    transaction_id: str,
    request: Request,
    container: Container = Depends(get_container),
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.update_transaction).handle(
        {**body, "id": transaction_id, "accountId": account_id}
    )


@router.delete("/{transaction_id}")
async def delete_transaction(
    account_id: str,
    transaction_id: str,
    container: Container = Depends(get_container),
) -> JSONResponse:
    return await Controller(container.delete_transaction).handle(
        {"id": transaction_id, "accountId": account_id}
    )
