import pytest

import error


@pytest.mark.parametrize(
    "exc_class,status_code",
    [
        (error.AuthenticationError, 401),
        (error.AuthorizationError, 403),
        (error.ResourceNotFoundError, 404),
        (error.DatabaseError, 500),
        (error.StoreError, 500),
        (error.SubmissionError, 500),
    ],
)
def test_domain_errors_carry_status(exc_class, status_code):
    exc = exc_class()
    assert isinstance(exc, error.ServerError)
    assert exc.status_code == status_code
    assert str(exc) == exc.msg


def test_error_hierarchy_is_only_what_the_api_raises():
    declared = {
        name for name, value in vars(error).items()
        if isinstance(value, type) and issubclass(value, Exception)
    }
    assert declared == {
        "ServerError",
        "AuthenticationError",
        "AuthorizationError",
        "ResourceNotFoundError",
        "DatabaseError",
        "StoreError",
        "SubmissionError",
    }


def test_store_error_message_is_generic():
    assert "Please try again" in error.StoreError().msg
    assert error.AuthorizationError().msg == "Acesso negado"
