"""Error Hierarchy — typed, categorized exceptions for every Todo API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) never reach the controller
    - Controller errors default to 500 unless the subclass declares otherwise
    - to_response() produces the error half of the response envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TodoApiError base: one renderer handles every outcome
    - Validation and malformed-request failures share the envelope shape
      (details list) but keep distinct codes
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone
from uuid import UUID


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    MALFORMED_REQUEST = "malformed_request"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    EXTERNAL_API = "external_api"
    ROUTING = "routing"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    todo_id: UUID | None = None
    template_id: str | None = None


@dataclass(frozen=True)
class FieldViolation:
    """One failed field check — field path, human message, machine type."""
    field: str
    message: str
    type: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


class TodoApiError(Exception):
    """Base exception for all Todo API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: list[FieldViolation] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = list(details or [])

    def to_response(self) -> dict:
        """Convert to the error part of the response envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "details": [d.to_dict() for d in self.details],
                "context": {
                    "todo_id": (
                        str(self.context.todo_id)
                        if self.context.todo_id is not None else None
                    ),
                    "template_id": self.context.template_id,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InputValidationError(TodoApiError):
    """One or more declared field constraints failed."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        fields = ", ".join(sorted({v.field for v in violations}))
        super().__init__(
            f"Request failed validation: {fields}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, violations,
        )

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.details]


class MalformedRequestError(TodoApiError):
    """Request could not be parsed into its typed record."""
    def __init__(
        self,
        violations: list[FieldViolation] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "Malformed request",
            "MALFORMED_REQUEST", ErrorCategory.MALFORMED_REQUEST,
            ErrorSeverity.WARNING, context, 400, violations,
        )


class RouteError(TodoApiError):
    """Framework-level HTTP failure (unknown path, wrong method)."""
    _CODES = {404: "ROUTE_NOT_FOUND", 405: "METHOD_NOT_ALLOWED"}

    def __init__(self, status_code: int, message: str):
        super().__init__(
            message, self._CODES.get(status_code, "HTTP_ERROR"),
            ErrorCategory.ROUTING, ErrorSeverity.WARNING, None, status_code,
        )


# ─── Controller Errors ──────────────────────────────────────────

class ControllerError(TodoApiError):
    """Failure reported by the business-logic controller."""
    def __init__(
        self,
        message: str,
        code: str = "CONTROLLER_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message, code, category, severity, context, http_status)


class TodoNotFoundError(ControllerError):
    """Completion requested for an id the controller does not know."""
    def __init__(self, todo_id: UUID, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.todo_id = todo_id
        super().__init__(
            f"Todo '{todo_id}' not found",
            "TODO_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class TodoAlreadyCompletedError(ControllerError):
    """Completion requested for a todo that is already completed."""
    def __init__(self, todo_id: UUID, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.todo_id = todo_id
        super().__init__(
            f"Todo '{todo_id}' is already completed",
            "TODO_ALREADY_COMPLETED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


class MailDeliveryError(ControllerError):
    """Mail provider rejected or never received the dispatch."""
    def __init__(
        self, message: str, template_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.template_id = template_id
        super().__init__(
            f"Mail delivery failed: {message}",
            "MAIL_DELIVERY_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 502,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(TodoApiError):
    """Unexpected fault — message is fixed, never the exception text."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
