"""Error Hierarchy - typed, categorized exceptions for every invite failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input and conflict errors are 400-level; storage errors are 500-level
    - to_response() produces the REST envelope rendered by the global handler
    - An unknown key during validation is NOT an error (see ValidationOutcome)

Design Decisions:
    - Single hierarchy with GuestlistError base: FastAPI global handler catches all
      (ADR: uniform error shape)
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    guest_name: str | None = None


class GuestlistError(Exception):
    """Base exception for all invite registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(GuestlistError):
    """Caller-supplied field missing or malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field"] = self.field
        return response


class ConflictError(GuestlistError):
    """Uniqueness invariant would be violated (guest already invited)."""
    def __init__(self, guest_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.guest_name = guest_name
        super().__init__(
            "Guest Name/Number already exists",
            "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.guest_name = guest_name


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageFailureError(GuestlistError):
    """Record store unreachable, timed out, or rejected a write."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
