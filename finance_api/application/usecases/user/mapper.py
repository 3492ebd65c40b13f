from __future__ import annotations

from ....domain.entities import User
from .dtos import UserOutput


def to_user_output(user: User) -> UserOutput:
    """Entidad -> DTO (sin password)."""
    return UserOutput(
        id=user.id,
        name=user.name,
        email=user.email,
        cpf=user.cpf,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
