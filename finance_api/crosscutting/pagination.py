"""
===============================================================================
MÓDULO: Utilidades de paginación (page / limit)
===============================================================================

Objetivo
--------
Respuesta uniforme para endpoints listados:

    {"data": [...], "pagination": {"page", "limit", "total", "totalPages"}}

totalPages = ceil(total / limit); una colección vacía da total=0, totalPages=0.
===============================================================================
"""

from __future__ import annotations

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class PaginationInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int = Field(description="Página actual (1-based)")
    limit: int = Field(description="Items por página")
    total: int = Field(description="Total de items que cumplen el filtro")
    total_pages: int = Field(description="ceil(total / limit)")


class Paginated(BaseModel, Generic[T]):
    data: List[T] = Field(description="Items de la página actual")
    pagination: PaginationInfo


def offset_for(page: int, limit: int) -> int:
    return (max(1, page) - 1) * limit


def paginate(items: List[T], *, page: int, limit: int, total: int) -> Paginated[T]:
    """Arma el envelope paginado a partir de una página ya recortada."""
    return Paginated(
        data=items,
        pagination=PaginationInfo(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
        ),
    )
