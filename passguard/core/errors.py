"""Error Hierarchy - typed, categorized exceptions for passguard misuse.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - A failed password check is NEVER an exception: it is the Err outcome
    - Exceptions here signal programming errors (wrong-variant access)
    - to_dict() produces a JSON-serializable error envelope

Design Decisions:
    - Single hierarchy with PassguardError base: callers catch one type (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    USAGE = "usage"


@dataclass
class ErrorContext:
    """Extra context attached to an error for debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    variant: str | None = None


class PassguardError(Exception):
    """Base exception for all passguard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "variant": self.context.variant,
                },
            }
        }


# ─── Usage Errors ────────────────────────────────────────────────

class OutcomeAccessError(PassguardError):
    """Payload of the wrong outcome variant was requested."""
    def __init__(
        self,
        message: str,
        messages: tuple[str, ...] = (),
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "OUTCOME_ACCESS_ERROR", ErrorCategory.USAGE,
            ErrorSeverity.ERROR, context,
        )
        self.messages = messages
