"""User Repository — SQLAlchemy implementation of the UserRepository protocol.

Invariants:
    - save() commits and refreshes: the returned record has its id and server defaults
    - A unique-constraint rejection on insert rolls back and surfaces as
      ResourceAlreadyExistsError naming the clashing field (409)
    - Any other constraint rejection (e.g. update onto a taken email) surfaces as
      DataIntegrityError (409)
    - get_by_id() returns None for ids outside the BIGINT column range
    - find_page() total counts every row (active and inactive alike)
    - Unknown sort fields raise ValueError before any query runs

Design Decisions:
    - Sort field accepted in wire (camelCase) or attribute (snake_case) form
    - Secondary ordering by id keeps pages stable when the sort column has ties
    - Clashing field read from the driver message: constraint name on PostgreSQL
      (uq_users_email), table.column on SQLite (users.email)
"""

import logging
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.core.domain_types import (
    USER_RESOURCE, SortDirection, UserField, UserId, to_attribute_name,
)
from user_registry.core.errors import (
    DataIntegrityError, ResourceAlreadyExistsError, describe_integrity_violation,
)
from user_registry.core.pagination import page_offset
from user_registry.models.user import ID_MAX, ID_MIN, User

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """UserRepository over an AsyncSession (one session per request)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: UserId) -> User | None:
        if not ID_MIN <= user_id <= ID_MAX:
            return None
        return await self.db.get(User, user_id)

    async def get_by_username(self, username: str) -> User | None:
        return await self.db.scalar(
            select(User).where(User.username == username),
        )

    async def get_by_email(self, email: str) -> User | None:
        return await self.db.scalar(
            select(User).where(User.email == email),
        )

    async def find_page(
        self, page: int, size: int, sort_field: str, direction: SortDirection,
    ) -> tuple[Sequence[User], int]:
        column = _resolve_sort_column(sort_field)
        order = column.desc() if direction is SortDirection.DESC else column.asc()

        total = await self.db.scalar(select(func.count()).select_from(User)) or 0
        result = await self.db.execute(
            select(User)
            .order_by(order, User.id.asc())
            .offset(page_offset(page, size))
            .limit(size)
        )
        return list(result.scalars().all()), total

    async def save(self, user: User) -> User:
        inserting = user.id is None
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            detail = str(e.orig)
            logger.warning(f"DB integrity error on users: {detail}")
            field = _violated_unique_field(detail) if inserting else None
            if field is not None:
                raise ResourceAlreadyExistsError(
                    USER_RESOURCE, field.value, getattr(user, field.value),
                )
            raise DataIntegrityError(describe_integrity_violation(detail))
        await self.db.refresh(user)
        return user


def _resolve_sort_column(sort_field: str):
    """Map a wire or attribute name onto a users column."""
    columns = User.__table__.columns
    for candidate in (sort_field, to_attribute_name(sort_field)):
        if candidate in columns and candidate != "password_hash":
            return getattr(User, candidate)
    raise ValueError(f"No property '{sort_field}' found for type 'User'")


def _violated_unique_field(detail: str) -> UserField | None:
    for field in UserField:
        if f"uq_users_{field.value}" in detail or f"users.{field.value}" in detail:
            return field
    return None
