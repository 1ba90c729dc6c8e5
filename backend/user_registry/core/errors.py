"""Error Hierarchy — typed, categorized exceptions for all user registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status and short title the error boundary renders
    - Domain errors (400-level) are raised by the service and never recovered locally
    - Infrastructure errors render as 500 and never expose internal details to the caller

Design Decisions:
    - Single hierarchy with UserRegistryError base: one global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class UserRegistryError(Exception):
    """Base exception for all user registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        title: str = "Internal Server Error",
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.title = title

    def to_response(self) -> dict:
        """Convert to a compact dict for logs and debugging."""
        return {
            "code": self.code,
            "title": self.title,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "status": self.http_status,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(UserRegistryError):
    """Lookup by id found nothing."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} with id '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404, "Resource Not Found",
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ResourceAlreadyExistsError(UserRegistryError):
    """Uniqueness violation detected before insert."""
    def __init__(
        self,
        resource_type: str,
        field: str,
        value: object,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} with {field} '{value}' already exists",
            "RESOURCE_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409, "Resource already exists",
        )
        self.resource_type = resource_type
        self.field = field
        self.value = value


class DataIntegrityError(UserRegistryError):
    """Storage rejected a write on a constraint (unique index backstop)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DATA_INTEGRITY_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409, "Data Integrity Violation",
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserRegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500, "Internal Server Error",
        )
        self.operation = operation


def describe_integrity_violation(detail: str | None) -> str:
    """Map a driver constraint message to the user-facing conflict message."""
    if detail:
        lowered = detail.lower()
        if "unique" in lowered or "duplicate key" in lowered:
            return "The record already exists"
    return "Database operation failed due to data constraint violation"
