"""
===============================================================================
USE CASE BASE: validar -> ejecutar -> fallback UnknownError
===============================================================================

Name:
    UseCase (base genérica)

Business Goal:
    Que TODOS los casos de uso tengan el mismo contrato:

        run(raw) -> Either[DomainError, Output]

    y que ninguna excepción cruce el borde del caso de uso.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UseCase[InputT, OutputT]

Responsibilities:
    - Validar el input crudo con `schema` (pydantic). Si falla:
      wrong(InputValidationError) y execute() NO corre.
    - Delegar en execute() con el input ya validado/coercionado.
    - Convertir cualquier excepción (validación o ejecución) en
      wrong(UnknownError), logueando el stacktrace.

Collaborators:
    - domain.either (Right / Wrong)
    - domain.errors (input_validation_error / unknown_error)
    - crosscutting.logger

Estados:
    Validating -> (Wrong(validation) | Executing) -> (Right | Wrong)
    Cualquier estado -> Wrong(unknown) ante excepción.
===============================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from ...crosscutting.logger import logger
from ...domain.either import Either, wrong
from ...domain.errors import DomainError, input_validation_error, unknown_error

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT")


class Runnable(Protocol):
    """Lo único que un controller necesita de un caso de uso."""

    async def run(self, raw: Any) -> Either[DomainError, Any]: ...


class UseCase(ABC, Generic[InputT, OutputT]):
    schema: ClassVar[type[BaseModel]]

    async def run(self, raw: Any) -> Either[DomainError, OutputT]:
        try:
            try:
                data = self.schema.model_validate(raw if raw is not None else {})
            except ValidationError as exc:
                return wrong(input_validation_error(exc.errors()))

            return await self.execute(data)
        except Exception as exc:
            logger.exception(
                "Use case falló inesperadamente",
                extra={"use_case": type(self).__name__, "error": str(exc)},
            )
            return wrong(unknown_error(exc))

    @abstractmethod
    async def execute(self, data: InputT) -> Either[DomainError, OutputT]:
        """Lógica de negocio sobre input ya validado."""
