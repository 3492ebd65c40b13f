"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores de infraestructura)
===============================================================================

Objetivo
--------
Los errores de NEGOCIO viajan como valores (Either/DomainError). Este módulo
cubre solo fallas de infraestructura que sí se lanzan:
- error_code estable
- error_id para correlación con logs
- message "humana" (sin filtrar secretos)

Colaboradores:
  - infrastructure/repositories/postgres/* (lanzan DatabaseError)
  - application/usecases/base.py (convierte cualquier excepción en UnknownError)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class FinanceAPIError(Exception):
    """Base para errores internos del sistema (error_code + error_id + message)."""

    error_code: str = "FINANCE_API_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(FinanceAPIError):
    """Errores de DB (conexión, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"
