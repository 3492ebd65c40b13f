"""
===============================================================================
TARJETA CRC — domain/filters.py
===============================================================================

Módulo:
    Filtros de listado (traducción automática por tipo de valor)

Responsabilidades:
    - Convertir un dict plano de filtros en condiciones tipadas:
        * str       -> contiene (case-insensitive)
        * datetime  -> mayor o igual (>=)
        * otro      -> igualdad
    - Ignorar valores None (filtro no provisto).

Colaboradores:
    - application/usecases/*/list_*.py: construyen filtros desde el input.
    - infrastructure/repositories/postgres/_sql.py: traduce a SQL.
    - infrastructure/repositories/in_memory/store.py: evalúa en memoria.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping


class FilterOp(str, Enum):
    CONTAINS = "contains"
    GTE = "gte"
    EQ = "eq"


@dataclass(frozen=True)
class Filter:
    field: str
    op: FilterOp
    value: Any


def parse_filters(raw: Mapping[str, Any]) -> list[Filter]:
    filters: list[Filter] = []
    for field_name, value in raw.items():
        # "?description=" llega como "": sin filtro, no CONTAINS "".
        if value is None or value == "":
            continue
        if isinstance(value, str):
            filters.append(Filter(field_name, FilterOp.CONTAINS, value))
        elif isinstance(value, (datetime, date)):
            filters.append(Filter(field_name, FilterOp.GTE, value))
        else:
            filters.append(Filter(field_name, FilterOp.EQ, value))
    return filters
