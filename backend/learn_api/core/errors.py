"""Error Hierarchy — typed, categorized exceptions for content resolution failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors carry no HTTP status; api/error_handlers.py maps error kind to status once
    - No internal details leaked in user-facing messages
    - Failed lookups raise, they never return partially populated entities

Design Decisions:
    - Single hierarchy with LearnApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: lookup inputs travel with the error into the logs
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    INVALID_PATH = "invalid_path"
    INTEGRITY = "integrity"
    ACCESS = "access"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Lookup inputs attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    identifier: str | None = None
    category_path: str | None = None
    article_slug: str | None = None
    debug_info: dict[str, Any] | None = None


class LearnApiError(Exception):
    """Base exception for all content API errors."""

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

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "identifier": self.context.identifier,
            "category_path": self.context.category_path,
            "article_slug": self.context.article_slug,
        }


# ─── Request Errors ──────────────────────────────────────────────

class NotFoundError(LearnApiError):
    """Requested category or article does not exist (or not under that path)."""
    def __init__(
        self, resource_type: str, identifier: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{identifier}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context,
        )
        self.resource_type = resource_type
        self.identifier = identifier


class InvalidPathError(LearnApiError):
    """Hierarchical article path is malformed."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            reason, "INVALID_PATH", ErrorCategory.INVALID_PATH,
            ErrorSeverity.WARNING, context,
        )
        self.reason = reason


class ValidationError(LearnApiError):
    """Input rejected as out of range.

    Pagination clamps instead of rejecting, so nothing in the pagination
    flow raises this; a blank article slug does.
    """
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


class AccessDeniedError(LearnApiError):
    """Caller lacks the capability a route requires."""
    def __init__(self, capability: str, context: ErrorContext | None = None):
        super().__init__(
            f"Missing required capability '{capability}'",
            "ACCESS_DENIED", ErrorCategory.ACCESS,
            ErrorSeverity.WARNING, context,
        )
        self.capability = capability


# ─── Integrity / Infrastructure Errors ───────────────────────────

class InvalidHierarchyError(LearnApiError):
    """Category parent links form a cycle."""
    def __init__(self, category_ids: list[int], context: ErrorContext | None = None):
        ids = ", ".join(str(i) for i in category_ids)
        super().__init__(
            f"Category hierarchy contains a cycle through: {ids}",
            "INVALID_HIERARCHY", ErrorCategory.INTEGRITY,
            ErrorSeverity.CRITICAL, context,
        )
        self.category_ids = category_ids


class DatabaseError(LearnApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
