"""User Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - UserCreate/UserUpdate enforce the column limits of models/user.py before the service runs
    - username is stripped and non-empty; email must be email-shaped
    - UserResponse never carries a password or its hash
    - Wire keys are camelCase; snake_case keys are accepted on input too

Design Decisions:
    - EmailStr (email-validator) for the email shape check
    - Shared alias config in WireModel instead of per-field aliases
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from user_registry.models.user import (
    EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, PASSWORD_HASH_MAX_LENGTH, USERNAME_MAX_LENGTH,
)


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _UserFields(WireModel):
    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)
    email: EmailStr
    first_name: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    last_name: str | None = Field(None, max_length=NAME_MAX_LENGTH)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("username cannot be empty or whitespace")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def check_email_length(cls, v: object) -> object:
        if isinstance(v, str) and len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
        return v


class UserCreate(_UserFields):
    """User creation — plaintext password, hashed by the service."""
    password: str = Field(min_length=1, max_length=PASSWORD_HASH_MAX_LENGTH)


class UserUpdate(_UserFields):
    """User update — password changes are not part of this contract."""


class UserResponse(WireModel):
    """User view — every persisted field except the password hash."""
    id: int
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    active: bool
    created_at: datetime
    updated_at: datetime | None = None


class UserPage(WireModel):
    """Paginated listing envelope."""
    content: list[UserResponse]
    current_page: int
    total_items: int
    total_pages: int
    size: int
    first: bool
    last: bool
    sort: str
    direction: str
