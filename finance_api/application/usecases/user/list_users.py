"""
USE CASE: List Users (paginado; filtros name/email por substring, fechas >=).
"""

from __future__ import annotations

from ....crosscutting.pagination import Paginated, paginate
from ....domain.either import Either, right
from ....domain.errors import DomainError
from ....domain.repositories import UserRepository
from ..base import UseCase
from .dtos import ListUsersInput, UserOutput
from .mapper import to_user_output


class ListUsersUseCase(UseCase[ListUsersInput, Paginated[UserOutput]]):
    schema = ListUsersInput

    def __init__(self, users: UserRepository) -> None:
        self._users = users

    async def execute(
        self, data: ListUsersInput
    ) -> Either[DomainError, Paginated[UserOutput]]:
        users, total = await self._users.find_where(
            page=data.page, limit=data.limit, filters=data.to_filters()
        )
        return right(
            paginate(
                [to_user_output(user) for user in users],
                page=data.page,
                limit=data.limit,
                total=total,
            )
        )
