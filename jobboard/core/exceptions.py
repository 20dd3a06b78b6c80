from typing import List, Union

Message = Union[str, List[str]]


class AppException(Exception):
    def __init__(
        self,
        message: Message,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR"
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(self.message)

class BadRequestError(AppException):
    """
    Schema or semantic violation (bad payload, immutable field, empty update).
    The message may be the full list of violations.
    """
    def __init__(self, message: Message = "Bad Request"):
        super().__init__(
            message=message,
            status_code=400,
            error_code="BAD_REQUEST"
        )

class AuthorizationError(AppException):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="UNAUTHORIZED"
        )

class NotFoundError(AppException):
    def __init__(self, message: str = "Not Found"):
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND"
        )
