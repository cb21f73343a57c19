"""Error Hierarchy — codes, categories, messages and log fields."""

from learn_api.core.errors import (
    AccessDeniedError, DatabaseError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidHierarchyError, InvalidPathError, LearnApiError, NotFoundError,
    ValidationError,
)


def test_not_found_message_and_fields():
    exc = NotFoundError("Category", "travel-tips")
    assert str(exc) == "Category 'travel-tips' not found"
    assert exc.code == "RESOURCE_NOT_FOUND"
    assert exc.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert exc.severity == ErrorSeverity.WARNING
    assert isinstance(exc, LearnApiError)


def test_invalid_path_keeps_reason():
    exc = InvalidPathError("empty path")
    assert exc.reason == "empty path"
    assert exc.message == "empty path"
    assert exc.code == "INVALID_PATH"


def test_validation_error_field():
    exc = ValidationError("limit must be positive", "limit")
    assert exc.field == "limit"
    assert exc.category == ErrorCategory.VALIDATION


def test_access_denied_names_capability():
    exc = AccessDeniedError("learn:read")
    assert "learn:read" in exc.message
    assert exc.capability == "learn:read"


def test_invalid_hierarchy_lists_ids():
    exc = InvalidHierarchyError([2, 3])
    assert exc.category_ids == [2, 3]
    assert "2, 3" in exc.message
    assert exc.severity == ErrorSeverity.CRITICAL


def test_database_error_operation():
    exc = DatabaseError("connection refused", "query")
    assert exc.message == "Database query failed: connection refused"
    assert exc.operation == "query"


def test_log_extra_carries_context():
    context = ErrorContext(identifier="42", category_path="travel-tips", article_slug="x")
    extra = NotFoundError("Article", "42", context).log_extra()
    assert extra == {
        "error_code": "RESOURCE_NOT_FOUND",
        "identifier": "42",
        "category_path": "travel-tips",
        "article_slug": "x",
    }


def test_default_context():
    exc = NotFoundError("Article", "1")
    assert exc.context.identifier is None
    assert exc.context.timestamp is not None
