"""
===============================================================================
TARJETA CRC — domain/errors.py
===============================================================================

Módulo:
    Taxonomía cerrada de errores de negocio

Responsabilidades:
    - Definir ErrorKind (conjunto cerrado, estable, serializable).
    - Representar DomainError (kind + message + slug [+ errors por campo]).
    - Proveer constructores con los mensajes canónicos de la API.

Colaboradores:
    - application/usecases/*: devuelven wrong(<constructor>(...)).
    - interfaces/api/http/controller.py: despacha por kind -> status HTTP.

Notas:
    - DomainError es un VALOR, no una excepción: nunca se lanza.
    - El slug es lo que el cliente ve en el envelope {code, error, slug}.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping

# Clave usada para issues de validación sin path (validaciones a nivel objeto).
FORM_ERRORS_KEY = "form"

INPUT_VALIDATION_MESSAGE = "Um ou mais dados de entrada fornecidos são inválidos"
EMAIL_OR_PASSWORD_WRONG_MESSAGE = "Email ou senha do usuário incorreto"
INVALID_REFRESH_TOKEN_MESSAGE = "Refresh token inválido ou expirado"
UNKNOWN_ERROR_MESSAGE = "Erro desconhecido no servidor!"

# Pydantic antepone este prefijo a los ValueError de validators custom.
_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


class ErrorKind(str, Enum):
    """
    Categorías de error de negocio.

    El controller mapea cada kind a un status HTTP; cualquier kind sin
    entrada en su tabla termina en 500.
    """

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class DomainError:
    kind: ErrorKind
    message: str
    slug: str
    errors: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def render(self) -> Any:
        """Payload del campo "error" en la respuesta HTTP."""
        if self.kind == ErrorKind.VALIDATION:
            return {
                "message": self.message,
                "errors": {key: list(msgs) for key, msgs in self.errors.items()},
            }
        return self.message


def input_validation_error(issues: Iterable[Mapping[str, Any]]) -> DomainError:
    """
    Construye el error de validación a partir de issues estilo pydantic
    (dicts con "loc" y "msg"). Issues sin path se agrupan bajo "form".
    """
    grouped: dict[str, list[str]] = {}
    for issue in issues:
        loc = issue.get("loc") or ()
        key = ".".join(str(part) for part in loc) or FORM_ERRORS_KEY
        message = str(issue.get("msg", ""))
        if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
            message = message[len(_PYDANTIC_VALUE_ERROR_PREFIX) :]
        grouped.setdefault(key, []).append(message)

    return DomainError(
        kind=ErrorKind.VALIDATION,
        message=INPUT_VALIDATION_MESSAGE,
        slug="InputValidationError",
        errors={key: tuple(msgs) for key, msgs in grouped.items()},
    )


def not_found_error(entity: str, field_name: str, value: Any) -> DomainError:
    return DomainError(
        kind=ErrorKind.NOT_FOUND,
        message=f"Não foi encontrado(a) {entity} com {field_name} '{value}'.",
        slug="NotFoundError",
    )


def already_exists_error(entity: str, field_name: str | None = None) -> DomainError:
    field_info = f" com este(a) {field_name}" if field_name else ""
    return DomainError(
        kind=ErrorKind.ALREADY_EXISTS,
        message=f"Já existe um(a) {entity}{field_info}.",
        slug="AlreadyExistsError",
    )


def email_or_password_wrong_error() -> DomainError:
    return DomainError(
        kind=ErrorKind.AUTH_FAILED,
        message=EMAIL_OR_PASSWORD_WRONG_MESSAGE,
        slug="EmailOrPasswordWrongError",
    )


def invalid_refresh_token_error() -> DomainError:
    return DomainError(
        kind=ErrorKind.INVALID_TOKEN,
        message=INVALID_REFRESH_TOKEN_MESSAGE,
        slug="InvalidRefreshTokenError",
    )


def unknown_error(cause: object = None) -> DomainError:
    """Falla inesperada: conserva el mensaje original si existe."""
    if isinstance(cause, BaseException):
        message = str(cause) or UNKNOWN_ERROR_MESSAGE
    elif isinstance(cause, str) and cause:
        message = cause
    else:
        message = UNKNOWN_ERROR_MESSAGE
    return DomainError(kind=ErrorKind.UNKNOWN, message=message, slug="UnknownError")
