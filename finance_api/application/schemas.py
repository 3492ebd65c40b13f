"""
===============================================================================
TARJETA CRC — application/schemas.py
===============================================================================

Módulo:
    Piezas compartidas de validación de entrada / salida (pydantic v2)

Responsabilidades:
    - InputSchema / OutputSchema: convención camelCase en el borde JSON.
    - PaginationInput: page (>=1, default 1), limit (1..100, default 10),
      createdAt / updatedAt opcionales (coerción desde query string).
    - Tipos anotados reutilizables: ScaledAmount, Password, Cpf, Email, RequiredStr.

Colaboradores:
    - domain/value_objects.py: reglas puras (CPF, currency, password).
    - domain/filters.py: PaginationInput.to_filters().
    - application/usecases/*/dtos.py: heredan / componen estas piezas.
===============================================================================
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Callable, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
)
from pydantic.alias_generators import to_camel

from ..crosscutting.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT
from ..domain.filters import Filter, parse_filters
from ..domain.value_objects import (
    CURRENCY_MAX_MESSAGE,
    CURRENCY_POSITIVE_MESSAGE,
    CURRENCY_PRECISION_MESSAGE,
    MAX_SCALED_AMOUNT,
    check_password_rules,
    has_valid_precision,
    is_valid_cpf,
    to_scaled_amount,
)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class InputSchema(BaseModel):
    """Base de inputs: acepta camelCase (JSON) y snake_case (tests/internos)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


class OutputSchema(BaseModel):
    """Base de DTOs de salida: se serializa con by_alias=True (camelCase)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Validators reutilizables
# ---------------------------------------------------------------------------


def _required(message: str) -> Callable[[str], str]:
    def check(value: str) -> str:
        if not value:
            raise ValueError(message)
        return value

    return check


def _parse_amount(value: Any) -> int:
    # bool es subclase de int: se rechaza explícitamente.
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueError("Valor deve ser um número")
    if value <= 0:
        raise ValueError(CURRENCY_POSITIVE_MESSAGE)
    if not has_valid_precision(value):
        raise ValueError(CURRENCY_PRECISION_MESSAGE)
    scaled = to_scaled_amount(value)
    if scaled > MAX_SCALED_AMOUNT:
        raise ValueError(CURRENCY_MAX_MESSAGE)
    return scaled


def _check_password(value: str) -> str:
    error = check_password_rules(value)
    if error:
        raise ValueError(error)
    return value


def _check_cpf(value: str) -> str:
    if not is_valid_cpf(value):
        raise ValueError("CPF inválido")
    return value


def _check_email(value: str) -> str:
    if not _EMAIL_RE.match(value):
        raise ValueError("Email inválido")
    return value


# Credenciales y tokens se validan tal cual llegan (sin strip).
_Verbatim = StringConstraints(strip_whitespace=False)

RequiredStr = Annotated[str, AfterValidator(_required("Campo obrigatório"))]
VerbatimRequiredStr = Annotated[
    str, _Verbatim, AfterValidator(_required("Campo obrigatório"))
]
AccountName = Annotated[str, AfterValidator(_required("Nome da conta é obrigatório"))]
ScaledAmount = Annotated[int, BeforeValidator(_parse_amount)]
Password = Annotated[str, _Verbatim, AfterValidator(_check_password)]
Cpf = Annotated[str, AfterValidator(_check_cpf)]
Email = Annotated[str, AfterValidator(_check_email)]


# ---------------------------------------------------------------------------
# Paginación
# ---------------------------------------------------------------------------

_PAGINATION_CONTROL_FIELDS = {"page", "limit"}


class PaginationInput(InputSchema):
    page: int = Field(DEFAULT_PAGE, ge=1)
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Fechas sin zona ("2024-01-31") se interpretan como UTC.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_filters(self, *, exclude: set[str] | None = None) -> list[Filter]:
        """Todo campo no-control y no-None se convierte en filtro."""
        skip = _PAGINATION_CONTROL_FIELDS | (exclude or set())
        raw = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name not in skip
        }
        return parse_filters(raw)
