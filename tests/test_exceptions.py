import pytest

from jobboard.core.exceptions import (
    AppException,
    AuthorizationError,
    BadRequestError,
    NotFoundError,
)


@pytest.mark.parametrize("cls, status_code, error_code, default", [
    (BadRequestError, 400, "BAD_REQUEST", "Bad Request"),
    (AuthorizationError, 401, "UNAUTHORIZED", "Unauthorized"),
    (NotFoundError, 404, "NOT_FOUND", "Not Found"),
])
def test_error_classes(cls, status_code, error_code, default):
    exc = cls()
    assert isinstance(exc, AppException)
    assert exc.message == default
    assert exc.status_code == status_code
    assert exc.error_code == error_code

def test_app_exception_carries_only_what_the_responder_uses():
    exc = BadRequestError(["a", "b"])
    assert exc.message == ["a", "b"]
    assert not hasattr(exc, "details")
    with pytest.raises(TypeError):
        AppException("x", details={"k": "v"})
