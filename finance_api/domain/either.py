"""
===============================================================================
TARJETA CRC — domain/either.py
===============================================================================

Módulo:
    Tipo de resultado Either (Right = éxito / Wrong = falla)

Responsabilidades:
    - Representar el resultado de un caso de uso SIN excepciones.
    - Garantizar exclusión mutua: un valor es Right o Wrong, nunca ambos.
    - Inmutabilidad (frozen dataclasses).

Colaboradores:
    - application/usecases: devuelven Either[DomainError, Output].
    - interfaces/api/http/controller.py: decide status HTTP según el lado.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class Right(Generic[R]):
    """Lado de éxito."""

    value: R

    def is_right(self) -> bool:
        return True

    def is_wrong(self) -> bool:
        return False


@dataclass(frozen=True)
class Wrong(Generic[L]):
    """Lado de falla (business error esperado)."""

    value: L

    def is_right(self) -> bool:
        return False

    def is_wrong(self) -> bool:
        return True


Either = Union[Wrong[L], Right[R]]


def right(value: R) -> Right[R]:
    return Right(value)


def wrong(value: L) -> Wrong[L]:
    return Wrong(value)
