from __future__ import annotations

from ....domain.entities import Account
from ..user.mapper import to_user_output
from .dtos import AccountOutput


def to_account_output(account: Account) -> AccountOutput:
    return AccountOutput(
        id=account.id,
        name=account.name,
        users=[to_user_output(user) for user in account.users],
        created_at=account.created_at,
        updated_at=account.updated_at,
    )
