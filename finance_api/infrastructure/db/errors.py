"""
===============================================================================
CRC CARD — infrastructure/db/errors.py
===============================================================================

Componente:
  Errores tipados del Pool/Conectividad

Responsabilidades:
  - Evitar RuntimeError genéricos.
  - Dar semántica clara: "no abierto", "ya abierto".
===============================================================================
"""


class DatabasePoolError(Exception):
    """Base de errores de pool de base de datos."""


class PoolAlreadyOpenError(DatabasePoolError):
    """Se intentó abrir el pool más de una vez."""


class PoolNotOpenError(DatabasePoolError):
    """Se intentó usar el pool sin open()."""
