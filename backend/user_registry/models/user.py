"""User ORM — persists the user resource.

Invariants:
    - id is an autoincrement integer primary key, assigned by storage on insert
    - username and email each carry a unique constraint (independent of active)
    - password_hash never holds plaintext (set by the service via PasswordHasher)
    - created_at is written once; updated_at changes on every mutation
    - active=False is a soft delete; the row is never removed by the service

Design Decisions:
    - BigInteger with an Integer variant on SQLite: SQLite only autoincrements INTEGER keys
    - Unique constraints at table level: storage is the backstop for concurrent creates
"""

from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger, Boolean, DateTime, Integer, String, UniqueConstraint, true,
)
from sqlalchemy.orm import Mapped, mapped_column

from user_registry.db.base import Base

USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100
PASSWORD_HASH_MAX_LENGTH = 120
NAME_MAX_LENGTH = 50
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """User entity — one registered account."""
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username"),
        UniqueConstraint("email"),
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH), nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String(PASSWORD_HASH_MAX_LENGTH), nullable=False,
    )
    first_name: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=True,
    )
    last_name: Mapped[str | None] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=True,
    )
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"User(id={self.id!r}, username={self.username!r}, "
            f"email={self.email!r}, active={self.active!r})"
        )
