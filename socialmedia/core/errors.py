"""Error Hierarchy — typed, categorized exceptions for every account and message failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
      and an http_status the transport layer answers with
    - Domain errors (400-level) are raised at the point of violation, before any write
    - Unclassified errors (500) always carry the same generic message
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SocialMediaError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields kept off the message text
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    account_id: int | None = None
    message_id: int | None = None


class SocialMediaError(Exception):
    """Base exception for all Social Media API errors."""

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


# ─── Account Errors ─────────────────────────────────────────────

class RegistrationError(SocialMediaError):
    """Registration input rejected (blank username or short password)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REGISTRATION_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class DuplicateUsernameError(SocialMediaError):
    """Username already taken by another account."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            f"Username '{username}' is already taken",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.username = username


class AuthenticationError(SocialMediaError):
    """Login failed: unknown username or incorrect password."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid username or password",
            "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        # never surfaced to the client, only logged
        self.reason = reason


# ─── Message Errors ─────────────────────────────────────────────

class BlankTextError(SocialMediaError):
    """Message text is missing or whitespace-only."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Message text cannot be blank",
            "MESSAGE_TEXT_BLANK", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class TooLongError(SocialMediaError):
    """Message text exceeds the maximum length."""
    def __init__(self, length: int, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Message text must be at most {limit} characters (got {length})",
            "MESSAGE_TEXT_TOO_LONG", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.length = length
        self.limit = limit


class UserNotFoundError(SocialMediaError):
    """Posting account does not exist."""
    def __init__(self, account_id: int | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.account_id = account_id
        super().__init__(
            f"Account '{account_id}' does not exist",
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 400,
        )


class MessageNotFoundError(SocialMediaError):
    """Update targeted a message id with no row behind it."""
    def __init__(self, message_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.message_id = message_id
        super().__init__(
            f"Message '{message_id}' not found",
            "MESSAGE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 400,
        )


# ─── Unclassified Errors (500-level) ────────────────────────────

class UnclassifiedError(SocialMediaError):
    """Any failure outside the domain taxonomy. Message is always generic."""
    def __init__(
        self,
        code: str = "INTERNAL_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            GENERIC_ERROR_MESSAGE, code, category,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DatabaseError(UnclassifiedError):
    """Database operation failed. Detail is kept for logs only."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        super().__init__("DATABASE_ERROR", ErrorCategory.DATABASE, context)
        self.detail = detail
        self.operation = operation
