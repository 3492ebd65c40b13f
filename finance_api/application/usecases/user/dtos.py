"""
DTOs de entrada/salida de los casos de uso de usuarios.

El output NUNCA incluye el hash de la contraseña.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from ...schemas import (
    Cpf,
    Email,
    InputSchema,
    OutputSchema,
    PaginationInput,
    Password,
    RequiredStr,
    VerbatimRequiredStr,
)


class CreateUserInput(InputSchema):
    name: RequiredStr
    email: Email
    password: Password
    cpf: Cpf


class ListUsersInput(PaginationInput):
    name: Optional[str] = None
    email: Optional[str] = None


class ShowUserInput(InputSchema):
    id: UUID


class UpdateUserInput(InputSchema):
    id: UUID
    name: Optional[RequiredStr] = None
    email: Optional[Email] = None
    cpf: Optional[Cpf] = None


class DeleteUserInput(InputSchema):
    id: UUID


class ChangeUserPasswordInput(InputSchema):
    email: Email
    current_password: VerbatimRequiredStr
    new_password: Password


class UserOutput(OutputSchema):
    id: UUID
    name: str
    email: str
    cpf: str
    created_at: datetime
    updated_at: datetime


class MessageOutput(OutputSchema):
    message: str
