"""Error Hierarchy — typed, categorized exceptions for all Users API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_response() always carries a top-level "message" string
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UsersApiError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - http_status overridable per raise site: delete reports a missing user as 400
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from users_api.core.domain_types import UserMessage


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    RATE_LIMITED = "rate_limited"
    INTERNAL = "internal"
    DIAGNOSTIC = "diagnostic"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

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
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UserNotFoundError(UsersApiError):
    """No user with the requested id."""
    def __init__(
        self,
        user_id: str,
        message: str = UserMessage.NOT_FOUND.value,
        http_status: int = 404,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            message, "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, http_status,
        )
        self.user_id = user_id


class DuplicateUserError(UsersApiError):
    """A user with the same name already exists."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            UserMessage.ALREADY_EXISTS.value,
            "USER_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.name = name


# ─── Internal Errors (500-level) ────────────────────────────────

class IdentifierExhaustedError(UsersApiError):
    """Id factory kept returning ids that were already issued."""
    def __init__(self, attempts: int, context: ErrorContext | None = None):
        super().__init__(
            f"Could not generate a unique user id after {attempts} attempts",
            "ID_EXHAUSTED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.attempts = attempts


class UnexpectedFaultError(UsersApiError):
    """Any fault a route handler did not anticipate."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            UserMessage.SOMETHING_WENT_WRONG.value,
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class ArtificialError(UsersApiError):
    """Raised on purpose by the error probe endpoint."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            UserMessage.PROBE.value,
            "ARTIFICIAL_ERROR", ErrorCategory.DIAGNOSTIC,
            ErrorSeverity.INFO, context, 500,
        )
