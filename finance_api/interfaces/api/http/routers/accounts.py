"""
Rutas de cuentas (todas con access token):

    POST   /account        -> 201
    GET    /account        -> paginado, filtro name
    GET    /account/{id}
    PUT    /account/{id}
    DELETE /account/{id}
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .....container import Container
from .....identity.auth import require_user
from ..controller import Controller
from ..dependencies import get_container, query_input, read_json_body

router = APIRouter(tags=["accounts"], dependencies=[Depends(require_user())])


@router.post("/account")
async def create_account(
    request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.create_account, success_status=201).handle(body)


@router.get("/account")
async def list_accounts(
    request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    return await Controller(container.list_accounts).handle(query_input(request))


@router.get("/account/{account_id}")
async def get_account(
    account_id: str, container: Container = Depends(get_container)
) -> JSONResponse:
    return await Controller(container.get_account).handle({"id": account_id})


@router.put("/account/{account_id}")
async def update_account(
    account_id: str, request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.update_account).handle(
        {**body, "id": account_id}
    )


@router.delete("/account/{account_id}")
async def delete_account(
    account_id: str, container: Container = Depends(get_container)
) -> JSONResponse:
    return await Controller(container.delete_account).handle({"id": account_id})
