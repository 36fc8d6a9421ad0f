"""Error Hierarchy — verifies codes, statuses and the response envelope."""

from users_api.core.errors import (
    ArtificialError, DuplicateUserError, ErrorCategory, ErrorSeverity,
    IdentifierExhaustedError, UnexpectedFaultError, UserNotFoundError,
    UsersApiError,
)


def test_all_errors_share_base():
    for exc in (
        UserNotFoundError("u1"), DuplicateUserError("Amy"),
        IdentifierExhaustedError(8), UnexpectedFaultError("list users"),
        ArtificialError(),
    ):
        assert isinstance(exc, UsersApiError)


def test_not_found_defaults_to_404():
    exc = UserNotFoundError("u1")
    assert exc.http_status == 404
    assert exc.message == "user not found"
    assert exc.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert exc.context.user_id == "u1"


def test_not_found_status_and_message_overridable():
    exc = UserNotFoundError("u1", message="user doesn't exist", http_status=400)
    assert exc.http_status == 400
    assert exc.message == "user doesn't exist"


def test_duplicate_is_400_conflict():
    exc = DuplicateUserError("Amy")
    assert exc.http_status == 400
    assert exc.category == ErrorCategory.CONFLICT
    assert exc.message == "user already exists"


def test_unexpected_fault_hides_details():
    exc = UnexpectedFaultError("create user")
    assert exc.message == "something went wrong"
    assert exc.severity == ErrorSeverity.CRITICAL
    assert exc.context.operation == "create user"


def test_to_response_envelope():
    body = ArtificialError().to_response()
    assert body["message"] == "error"
    assert body["error"]["code"] == "ARTIFICIAL_ERROR"
    assert body["error"]["category"] == "diagnostic"
    assert body["error"]["severity"] == "info"
    assert "timestamp" in body["error"]
