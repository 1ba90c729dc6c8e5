"""User Service — business rules for the user resource (list, get, create, update, soft delete).

Invariants:
    - create checks username, then email, before any hashing or persistence
    - create hashes the password exactly once and saves exactly once, only after both checks pass
    - username/email uniqueness ignores the active flag (inactive users still block)
    - update overwrites username, email, first_name, last_name and updated_at only
    - update does NOT re-check uniqueness against other users; a clash is left to the
      storage constraint (DataIntegrityError)
    - delete is soft: active=False, updated_at=now, record retained
    - ResourceNotFoundError / ResourceAlreadyExistsError propagate to the caller untouched

Design Decisions:
    - Collaborators injected as protocols: the in-memory fake gateway drives the unit tests
    - clock injected (defaults to UTC now) so timestamp ordering is testable
"""

import logging
from datetime import datetime
from typing import Callable

from user_registry.core.domain_types import USER_RESOURCE, SortDirection, UserField, UserId
from user_registry.core.errors import ResourceAlreadyExistsError, ResourceNotFoundError
from user_registry.core.pagination import PageInfo
from user_registry.core.repository_protocols import (
    PasswordHasher, UserMapperLike, UserRepository,
)
from user_registry.models.user import User, utc_now
from user_registry.schemas.user import UserCreate, UserPage, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Resource service for users. Stateless apart from its collaborators."""

    def __init__(
        self,
        repository: UserRepository,
        mapper: UserMapperLike,
        password_hasher: PasswordHasher,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.mapper = mapper
        self.password_hasher = password_hasher
        self.clock = clock

    async def list_users(
        self, page: int, size: int, sort_by: str, direction: str,
    ) -> UserPage:
        """One page of users; an unrecognized direction sorts ascending."""
        sort_direction = SortDirection.parse(direction)
        users, total = await self.repository.find_page(
            page, size, sort_by, sort_direction,
        )
        info = PageInfo(page=page, size=size, total_items=total)
        return UserPage(
            content=self.mapper.to_response_list(users),
            current_page=info.page,
            total_items=info.total_items,
            total_pages=info.total_pages,
            size=info.size,
            first=info.is_first,
            last=info.is_last,
            sort=sort_by,
            direction=direction,
        )

    async def get_user(self, user_id: UserId) -> UserResponse:
        user = await self._get_or_raise(user_id)
        return self.mapper.to_response(user)

    async def create_user(self, request: UserCreate) -> UserResponse:
        await self._ensure_username_available(request.username)
        await self._ensure_email_available(request.email)

        user = self.mapper.to_entity(request)
        now = self.clock()
        user.created_at = now
        user.updated_at = now
        user.password_hash = self.password_hasher.hash(request.password)

        saved = await self.repository.save(user)
        logger.info(
            f"User created: {saved.username}",
            extra={"user_id": saved.id, "resource": USER_RESOURCE},
        )
        return self.mapper.to_response(saved)

    async def update_user(self, user_id: UserId, request: UserUpdate) -> UserResponse:
        user = await self._get_or_raise(user_id)
        user = self.mapper.apply_update(request, user)
        user.updated_at = self.clock()

        saved = await self.repository.save(user)
        logger.info(
            f"User updated: {saved.username}",
            extra={"user_id": saved.id, "resource": USER_RESOURCE},
        )
        return self.mapper.to_response(saved)

    async def delete_user(self, user_id: UserId) -> None:
        user = await self._get_or_raise(user_id)
        user.active = False
        user.updated_at = self.clock()
        await self.repository.save(user)
        logger.info(
            f"User deactivated: {user.username}",
            extra={"user_id": user.id, "resource": USER_RESOURCE},
        )

    # ─── helpers ─────────────────────────────────────────────────

    async def _get_or_raise(self, user_id: UserId) -> User:
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError(USER_RESOURCE, user_id)
        return user

    async def _ensure_username_available(self, username: str) -> None:
        if await self.repository.get_by_username(username) is not None:
            raise ResourceAlreadyExistsError(
                USER_RESOURCE, UserField.USERNAME.value, username,
            )

    async def _ensure_email_available(self, email: str) -> None:
        if await self.repository.get_by_email(email) is not None:
            raise ResourceAlreadyExistsError(
                USER_RESOURCE, UserField.EMAIL.value, email,
            )
