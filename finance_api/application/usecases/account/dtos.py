"""
DTOs de entrada/salida de los casos de uso de cuentas.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from ...schemas import AccountName, InputSchema, OutputSchema, PaginationInput
from ..user.dtos import UserOutput


class CreateAccountInput(InputSchema):
    name: AccountName
    users_ids: List[UUID]


class ListAccountsInput(PaginationInput):
    name: Optional[str] = None


class GetAccountInput(InputSchema):
    id: UUID


class UpdateAccountInput(InputSchema):
    id: UUID
    name: AccountName


class DeleteAccountInput(InputSchema):
    id: UUID


class AccountOutput(OutputSchema):
    id: UUID
    name: str
    users: List[UserOutput]
    created_at: datetime
    updated_at: datetime
