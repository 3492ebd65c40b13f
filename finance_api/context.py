"""
===============================================================================
TARJETA CRC — finance_api/context.py (Contexto por request)
===============================================================================

Responsabilidades:
  - Mantener contexto "request-scoped" usando ContextVars (async-safe).
  - Permitir correlación de logs sin pasar parámetros por todo el stack.
  - Proveer helpers mínimos: set_request_context(), get_context_dict(), clear_context().

Colaboradores:
  - finance_api.crosscutting.middleware: setea request_id/method/path al inicio del request.
  - finance_api.crosscutting.logger: enriquece logs leyendo get_context_dict().
  - finance_api.identity.auth: setea user_id cuando el token es válido.

Restricciones:
  - Solo tipos primitivos (str) para serialización segura.
  - Defaults vacíos ("") para evitar None y simplificar JSON.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Final

request_id_var: ContextVar[str] = ContextVar("request_id", default="")
http_method_var: ContextVar[str] = ContextVar("http_method", default="")
http_path_var: ContextVar[str] = ContextVar("http_path", default="")

# Usuario autenticado (si el request pasó por require_user).
user_id_var: ContextVar[str] = ContextVar("user_id", default="")

_CTX_REQUEST_ID: Final[str] = "request_id"
_CTX_METHOD: Final[str] = "method"
_CTX_PATH: Final[str] = "path"
_CTX_USER_ID: Final[str] = "user_id"


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    """
    Setea el contexto mínimo del request.

    Regla:
      - Strings vacíos significan "no disponible".
    """
    request_id_var.set(request_id or "")
    http_method_var.set(method or "")
    http_path_var.set(path or "")


def set_user_context(user_id: str) -> None:
    user_id_var.set(user_id or "")


def get_context_dict() -> dict[str, str]:
    """
    Devuelve solo las claves con valor (evita ruido en logs).
    """
    values = {
        _CTX_REQUEST_ID: request_id_var.get(),
        _CTX_METHOD: http_method_var.get(),
        _CTX_PATH: http_path_var.get(),
        _CTX_USER_ID: user_id_var.get(),
    }
    return {key: value for key, value in values.items() if value}


def clear_context() -> None:
    """Resetea todas las variables (fin de request)."""
    request_id_var.set("")
    http_method_var.set("")
    http_path_var.set("")
    user_id_var.set("")
