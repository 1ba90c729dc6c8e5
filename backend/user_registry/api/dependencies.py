"""Route Dependencies — builds the UserService for one request.

Invariants:
    - One SqlAlchemyUserRepository per request, bound to that request's AsyncSession
    - The password hasher is process-wide (Argon2 parameters are fixed at startup)
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.core.repository_protocols import PasswordHasher
from user_registry.infrastructure.database import get_db
from user_registry.infrastructure.security import Argon2PasswordHasher
from user_registry.infrastructure.user_repository import SqlAlchemyUserRepository
from user_registry.services.user_mapper import UserMapper
from user_registry.services.user_service import UserService


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return Argon2PasswordHasher()


def get_user_service(
    db: AsyncSession = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(
        SqlAlchemyUserRepository(db), UserMapper(), password_hasher,
    )
