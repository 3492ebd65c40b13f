"""
Rutas públicas de sesión: login y refresh de access token.

No requieren bearer; las fallas de credenciales salen del caso de uso
(401 EmailOrPasswordWrongError / InvalidRefreshTokenError).
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .....container import Container
from ..controller import Controller
from ..dependencies import get_container, read_json_body

router = APIRouter(tags=["session"])


@router.post("/login")
async def login(
    request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.login).handle(body)


@router.post("/refresh")
async def refresh(
    request: Request, container: Container = Depends(get_container)
) -> JSONResponse:
    body = await read_json_body(request)
    return await Controller(container.refresh_token).handle(body)
