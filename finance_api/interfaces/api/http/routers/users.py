"""
===============================================================================
TARJETA CRC — routers/users.py
===============================================================================

Rutas:
    POST   /user                    -> CreateUserUseCase (201)
    GET    /user                    -> ListUsersUseCase (paginado)
    POST   /user/change-password    -> ChangeUserPasswordUseCase
    GET    /user/{id}               -> ShowUserUseCase
    PATCH  /user/{id}               -> UpdateUserUseCase
    DELETE /user/{id}               -> DeleteUserUseCase

Notas:
    - Todas requieren access token (require_user).
    - Los path params llegan como str: un id no-UUID es 400 de validación,
      no un 422 del framework.
===============================================================================
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .....container import Container
from .....identity.auth import require_user
from ..controller import Controller
from ..dependencies import get_container, query_input, read_json_body

router = APIRouter(tags=["users"], dependencies=[Depends(require_user())])


@router.post("/user")
async def create_user(
    request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.create_user, success_status=201).handle(body)


@router.get("/user")
async def list_users(
    request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    return await Controller(container.list_users).handle(query_input(request))


# R: registrada antes de /user/{id} para que "change-password" no se lea como id.
@router.post("/user/change-password")
async def change_user_password(
    request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.change_user_password).handle(body)


@router.get("/user/{user_id}")
async def show_user(
    user_id: str, container: Container = Depends(get_container)
) -> JSONResponse:
    return await Controller(container.show_user).handle({"id": user_id})


@router.patch("/user/{user_id}")
async def update_user(
    user_id: str, request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.update_user).handle({**body, "id": user_id})


@router.delete("/user/{user_id}")
async def delete_user(
    user_id: str, container: Container = Depends(get_container)
) -> JSONResponse:
    return await Controller(container.delete_user).handle({"id": user_id})
