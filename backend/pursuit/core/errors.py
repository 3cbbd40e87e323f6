"""Shell Errors — what the workspace and adapters raise, and how it reaches clients.

Invariants:
    - Each error class fixes its code, category, severity and HTTP status as class attributes
    - to_response() is the only REST error shape: {"error": {...}}
    - user_message (when set) replaces message in the response; message stays in logs
    - Criteria core functions never raise these: DecodeFailure and ceiling messages
      are return values, converted here by the workspace

Design Decisions:
    - Class attributes over constructor arguments: a subclass is one line of metadata
      plus an optional message, and handlers read attributes without isinstance chains
    - ErrorContext carries the storage key / application id so logs and responses agree
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where the failure happened (for logs and the response context block)."""
    storage_key: str | None = None
    application_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class PursuitError(Exception):
    """Base class. Subclasses override the four class attributes."""

    code: str = "INTERNAL_ERROR"
    category: ErrorCategory = ErrorCategory.INTERNAL
    severity: ErrorSeverity = ErrorSeverity.ERROR
    http_status: int = 500

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        ctx = self.context
        return {
            "error": {
                "code": self.code,
                "message": ctx.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": ctx.timestamp.isoformat(),
                "context": {
                    "storage_key": ctx.storage_key,
                    "application_id": ctx.application_id,
                },
            },
        }


# ─── Workspace errors (4xx) ──────────────────────────────────────

class CeilingValidationError(PursuitError):
    """Draft ceiling range breaks a cross-field rule; apply is blocked."""
    code = "CEILING_INVALID"
    category = ErrorCategory.VALIDATION
    http_status = 400


class PresetNotFoundError(PursuitError):
    """Load requested but no preset has been saved."""
    code = "PRESET_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(self, context: ErrorContext | None = None):
        super().__init__("No saved preset", context)


class PresetUnreadableError(PursuitError):
    """Stored preset exists but does not decode into criteria."""
    code = "PRESET_UNREADABLE"
    category = ErrorCategory.BUSINESS_RULE
    http_status = 422

    def __init__(self, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "Unable to load preset"
        super().__init__(f"Stored preset is unreadable: {reason}", ctx)
        self.reason = reason


class ApplySupersededError(PursuitError):
    """A later apply replaced this one before its delay elapsed."""
    code = "APPLY_SUPERSEDED"
    category = ErrorCategory.CONFLICT
    severity = ErrorSeverity.WARNING
    http_status = 409

    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Apply superseded by a newer request", context)


class ResourceNotFoundError(PursuitError):
    code = "RESOURCE_NOT_FOUND"
    category = ErrorCategory.RESOURCE_NOT_FOUND
    http_status = 404

    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(f"{resource_type} '{resource_id}' not found", context)


# ─── Infrastructure errors (5xx) ─────────────────────────────────

class DatabaseError(PursuitError):
    """SQLAlchemy failure inside a managed session (already rolled back)."""
    code = "DATABASE_ERROR"
    category = ErrorCategory.DATABASE
    severity = ErrorSeverity.CRITICAL
    http_status = 503

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(f"Database {operation} failed: {message}", context)
        self.operation = operation
