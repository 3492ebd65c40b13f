"""
===============================================================================
MÓDULO: Respuestas de error del borde HTTP
===============================================================================

Dos formatos conviven:

1) Errores de autenticación (antes de llegar al caso de uso):
       401 {"message": "Token não fornecido" | "Token inválido"}

2) Envelope de errores de caso de uso / fallback:
       {"code": <status>, "error": <message | {message, errors}>, "slug": <name>}

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  AuthHTTPException + error_envelope() + handlers

Responsabilidades:
  - Transportar fallas de bearer token hasta el handler
  - Construir el envelope {code, error, slug}
  - Proveer handlers (FastAPI) que devuelven JSON

Colaboradores:
  - identity/auth.py (lanza AuthHTTPException)
  - interfaces/api/http/controller.py (usa error_envelope)
  - api/exception_handlers.py (registra handlers)
===============================================================================
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

MISSING_TOKEN_MESSAGE = "Token não fornecido"
INVALID_TOKEN_MESSAGE = "Token inválido"


class AuthHTTPException(HTTPException):
    """Falla de autenticación bearer: siempre 401 con body {"message": ...}."""

    def __init__(self, message: str):
        super().__init__(status_code=401, detail=message)
        self.message = message


def missing_token() -> AuthHTTPException:
    return AuthHTTPException(MISSING_TOKEN_MESSAGE)


def invalid_token() -> AuthHTTPException:
    return AuthHTTPException(INVALID_TOKEN_MESSAGE)


def error_envelope(status_code: int, error: Any, slug: str) -> dict[str, Any]:
    """Body estándar de error: {code, error, slug}."""
    return {"code": status_code, "error": error, "slug": slug}


async def auth_exception_handler(
    request: Request, exc: AuthHTTPException
) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
