"""User Mapper — field copying between transfer shapes and the User record.

Invariants:
    - to_response never reads or exposes password_hash
    - to_entity copies the plaintext password into password_hash; the service hashes it
      before the record reaches the gateway
    - apply_update touches username, email, first_name, last_name only
    - No timestamps or IO here: the service owns the clock
"""

from typing import Sequence

from user_registry.models.user import User
from user_registry.schemas.user import UserCreate, UserResponse, UserUpdate


class UserMapper:
    """Stateless mapper; one instance can be shared."""

    def to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            active=user.active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def to_response_list(self, users: Sequence[User]) -> list[UserResponse]:
        return [self.to_response(user) for user in users]

    def to_entity(self, request: UserCreate) -> User:
        return User(
            username=request.username,
            email=request.email,
            password_hash=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
            active=True,
        )

    def apply_update(self, request: UserUpdate, user: User) -> User:
        user.username = request.username
        user.email = request.email
        user.first_name = request.first_name
        user.last_name = request.last_name
        return user
