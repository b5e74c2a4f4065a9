"""Error Hierarchy: status codes, categories and response bodies."""

from users_api.core.errors import (
    DatabaseError, ErrorCategory, NotFoundError, UsersApiError, ValidationError,
)


def test_validation_error_is_400_with_message():
    err = ValidationError("Name and email are required")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {"error": "Name and email are required"}


def test_not_found_error_names_resource():
    err = NotFoundError("User", 7)
    assert err.http_status == 404
    assert err.resource_id == 7
    assert err.to_response() == {"error": "User not found"}


def test_database_error_hides_cause():
    cause = RuntimeError("Table 'testdb.users' doesn't exist")
    err = DatabaseError("select", cause)
    assert err.http_status == 500
    assert err.cause is cause
    assert err.to_response() == {"error": "Database error"}


def test_all_errors_share_base():
    for err in (
        ValidationError("x"), NotFoundError("User", 1), DatabaseError("insert"),
    ):
        assert isinstance(err, UsersApiError)
