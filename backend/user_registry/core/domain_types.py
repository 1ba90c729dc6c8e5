"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the storage-generated integer key
    - SortDirection.parse never raises: unknown input falls back to ASC
    - to_attribute_name is idempotent on snake_case input

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

USER_RESOURCE = "User"


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Ordering applied to a paginated scan."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None) -> "SortDirection":
        """Case-insensitive lookup; anything unrecognized means ascending."""
        if raw:
            normalized = raw.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.ASC


class UserField(str, Enum):
    """Request fields checked for uniqueness on create."""
    USERNAME = "username"
    EMAIL = "email"


# ─── Attribute names ─────────────────────────────────────────────

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_attribute_name(name: str) -> str:
    """firstName -> first_name; wire names are camelCase, ORM attributes snake_case."""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).lower()
