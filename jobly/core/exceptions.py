"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Any, List, Optional, Union


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: Union[str, List[str]],
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ValidationException(APIException):
    """
    400 Validation Error.

    Carries one message per failed field so clients can show them all at once.
    """

    def __init__(
        self,
        messages: List[str],
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(400, code, messages, details)


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """Invalid username or password"""

    def __init__(self):
        super().__init__(
            message="Invalid username/password",
            code="INVALID_CREDENTIALS",
        )


class AdminRequiredException(UnauthorizedException):
    """Caller is anonymous or not an admin"""

    def __init__(self):
        super().__init__(
            message="Only admins can access",
            code="ADMIN_REQUIRED",
        )


# Resource specific exceptions
class CompanyNotFoundException(NotFoundException):
    """Company not found"""

    def __init__(self, handle: str):
        super().__init__(message=f"No company: {handle}", code="COMPANY_NOT_FOUND")


class JobNotFoundException(NotFoundException):
    """Job not found"""

    def __init__(self, job_id: int):
        super().__init__(message=f"No job: {job_id}", code="JOB_NOT_FOUND")


class UserNotFoundException(NotFoundException):
    """User not found"""

    def __init__(self, username: str):
        super().__init__(message=f"No user: {username}", code="USER_NOT_FOUND")


class DuplicateCompanyException(BadRequestException):
    """Company handle already taken"""

    def __init__(self, handle: str):
        super().__init__(
            message=f"Duplicate company: {handle}",
            code="DUPLICATE_COMPANY",
        )


class DuplicateUsernameException(BadRequestException):
    """Username already registered"""

    def __init__(self, username: str):
        super().__init__(
            message=f"Duplicate username: {username}",
            code="DUPLICATE_USERNAME",
        )
