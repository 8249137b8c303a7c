"""Error Hierarchy — typed, categorized exceptions for all enrollment failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the {status, message, data} REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BootcampError base: FastAPI global handler catches all
    - NotFoundError is raised by services, never by repositories (reads return None)
    - DeliveryError never reaches a client: the mailer logs and absorbs it
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    DELIVERY = "delivery"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class BootcampError(Exception):
    """Base exception for all enrollment API errors."""

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
        """Convert to the standard REST envelope."""
        return {
            "status": self.http_status,
            "message": self.message,
            "data": {
                "error": {
                    "code": self.code,
                    "category": self.category.value,
                    "severity": self.severity.value,
                    "timestamp": self.context.timestamp.isoformat(),
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                },
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(BootcampError):
    """Request data is missing or malformed."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class AuthenticationError(BootcampError):
    """Bad credentials, or a missing/invalid/expired bearer token."""
    def __init__(self, message: str = "Invalid Credentials", context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class NotFoundError(BootcampError):
    """Referenced id has no matching row."""
    def __init__(
        self, resource_type: str, resource_id: int | str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class ConflictError(BootcampError):
    """Uniqueness violation, or a state transition that is no longer allowed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(BootcampError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class DeliveryError(BootcampError):
    """Outbound email could not be rendered or sent."""
    def __init__(self, message: str, template: str, context: ErrorContext | None = None):
        super().__init__(
            f"Email delivery failed ({template}): {message}",
            "DELIVERY_ERROR", ErrorCategory.DELIVERY,
            ErrorSeverity.WARNING, context, 502,
        )
        self.template = template
