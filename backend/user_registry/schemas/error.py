"""Error Schemas — the single error payload returned for every failed request.

Invariants:
    - timestamp rendered as "YYYY-MM-DD HH:MM:SS"
    - validationErrors is always present (empty unless the request shape was invalid)
"""

from datetime import datetime

from pydantic import Field

from user_registry.schemas.user import WireModel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class FieldValidationError(WireModel):
    """One rejected request field."""
    field: str
    message: str


class ErrorResponse(WireModel):
    """Uniform error body."""
    timestamp: str = Field(
        default_factory=lambda: datetime.now().strftime(TIMESTAMP_FORMAT),
    )
    status: int
    error: str
    message: str
    path: str
    validation_errors: list[FieldValidationError] = Field(default_factory=list)
