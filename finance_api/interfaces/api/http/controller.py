"""
===============================================================================
TARJETA CRC — interfaces/api/http/controller.py
===============================================================================

Class:
    Controller

Responsabilidades:
    - Ejecutar un caso de uso (Runnable) con el input crudo del request.
    - Traducir Either -> HTTP:
        Right -> status de éxito (200 / 201) + body camelCase
        Wrong -> status según ErrorKind + envelope {code, error, slug}

Colaboradores:
    - application.usecases.base.Runnable
    - domain.errors.ErrorKind / DomainError
    - crosscutting.error_responses.error_envelope

Notas:
    - Dispatch por tabla ordenada (primer match gana); kind sin entrada -> 500.
    - Subclases pueden redefinir `status_table` sin tocar `handle()`.
===============================================================================
"""

from __future__ import annotations

from typing import Any, ClassVar, Sequence

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ....application.usecases.base import Runnable
from ....crosscutting.error_responses import error_envelope
from ....crosscutting.logger import logger
from ....domain.errors import DomainError, ErrorKind

INTERNAL_SERVER_ERROR = 500


class Controller:
    status_table: ClassVar[Sequence[tuple[ErrorKind, int]]] = (
        (ErrorKind.VALIDATION, 400),
        (ErrorKind.NOT_FOUND, 404),
        (ErrorKind.ALREADY_EXISTS, 409),
        (ErrorKind.AUTH_FAILED, 401),
        (ErrorKind.INVALID_TOKEN, 401),
    )

    def __init__(self, use_case: Runnable, *, success_status: int = 200) -> None:
        self._use_case = use_case
        self._success_status = success_status

    @classmethod
    def status_for(cls, error: DomainError) -> int:
        for kind, status_code in cls.status_table:
            if error.kind == kind:
                return status_code
        return INTERNAL_SERVER_ERROR

    async def handle(self, raw: Any) -> JSONResponse:
        result = await self._use_case.run(raw)

        if result.is_wrong():
            error = result.value
            status_code = self.status_for(error)
            if status_code >= INTERNAL_SERVER_ERROR:
                logger.error(
                    "Use case devolvió error interno",
                    extra={"slug": error.slug, "error_message": error.message},
                )
            return JSONResponse(
                status_code=status_code,
                content=error_envelope(status_code, error.render(), error.slug),
            )

        return JSONResponse(
            status_code=self._success_status,
            content=jsonable_encoder(result.value),
        )
