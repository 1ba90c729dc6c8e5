"""Boundary Protocols — contracts between the resource service and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - save() returns the persisted record with its id assigned

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory test fake needs no base class
    - Async gateway methods: implementations do IO; hasher and mapper stay synchronous
"""

from typing import TYPE_CHECKING, Protocol, Sequence

from user_registry.core.domain_types import SortDirection, UserId

if TYPE_CHECKING:
    from user_registry.models.user import User
    from user_registry.schemas.user import UserCreate, UserResponse, UserUpdate


class UserRepository(Protocol):
    """Persistence gateway for User records — implemented by shell."""
    async def get_by_id(self, user_id: UserId) -> "User | None": ...
    async def get_by_username(self, username: str) -> "User | None": ...
    async def get_by_email(self, email: str) -> "User | None": ...
    async def find_page(
        self, page: int, size: int, sort_field: str, direction: SortDirection,
    ) -> tuple[Sequence["User"], int]: ...
    async def save(self, user: "User") -> "User": ...


class PasswordHasher(Protocol):
    """One-way password derivation."""
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, password_hash: str) -> bool: ...


class UserMapperLike(Protocol):
    """Translation between transfer shapes and the User record."""
    def to_response(self, user: "User") -> "UserResponse": ...
    def to_response_list(self, users: Sequence["User"]) -> list["UserResponse"]: ...
    def to_entity(self, request: "UserCreate") -> "User": ...
    def apply_update(self, request: "UserUpdate", user: "User") -> "User": ...
