"""
DTOs de entrada/salida de los casos de uso de transacciones.

amount entra como número positivo con hasta 4 decimales y se valida/convierte
a entero escalado (x10^4) en el schema; sale como string con 4 decimales.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from ...schemas import InputSchema, OutputSchema, PaginationInput, ScaledAmount


class CreateTransactionInput(InputSchema):
    amount: ScaledAmount
    account_id: UUID
    description: Optional[str] = None


class ListTransactionsInput(PaginationInput):
    account_id: UUID
    description: Optional[str] = None


class GetTransactionInput(InputSchema):
    id: UUID
    account_id: UUID


class UpdateTransactionInput(InputSchema):
    id: UUID
    account_id: UUID
    amount: Optional[ScaledAmount] = None
    description: Optional[str] = None


class DeleteTransactionInput(InputSchema):
    id: UUID
    account_id: UUID


class TransactionOutput(OutputSchema):
    id: UUID
    amount: str
    description: Optional[str]
    account_id: UUID
    created_at: datetime
    updated_at: datetime
