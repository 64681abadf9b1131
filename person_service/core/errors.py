"""Error Hierarchy: typed, categorized exceptions for all person service failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps to exactly one HTTP status
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages
    - Store operations never raise these; absence is a value, not a fault
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None


class PersonServiceError(Exception):
    """Base exception for all person service errors."""

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
                "path": self.context.path,
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MalformedInputError(PersonServiceError):
    """Request body could not be decoded into the expected shape."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class ResourceNotFoundError(PersonServiceError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class MethodNotSupportedError(PersonServiceError):
    """HTTP verb is not supported on the requested path."""
    def __init__(
        self, method: str, path: str, allowed: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Method {method} not allowed on {path}",
            "METHOD_NOT_ALLOWED", ErrorCategory.METHOD_NOT_ALLOWED,
            ErrorSeverity.WARNING, context, 405,
        )
        self.method = method
        self.path = path
        self.allowed = allowed or []
