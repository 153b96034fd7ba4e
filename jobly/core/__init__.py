"""Core module exports."""
from jobly.core.config import Settings, get_settings
from jobly.core.database import (
    Base,
    close_db,
    create_engine,
    create_session_maker,
    get_db,
    init_db,
)
from jobly.core.security import (
    verify_password,
    hash_password,
    create_access_token,
    decode_token,
)
from jobly.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    NotFoundException,
    ValidationException,
    InvalidCredentialsException,
    AdminRequiredException,
    CompanyNotFoundException,
    JobNotFoundException,
    UserNotFoundException,
    DuplicateCompanyException,
    DuplicateUsernameException,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Database
    "Base",
    "close_db",
    "create_engine",
    "create_session_maker",
    "get_db",
    "init_db",
    # Security
    "verify_password",
    "hash_password",
    "create_access_token",
    "decode_token",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "ValidationException",
    "InvalidCredentialsException",
    "AdminRequiredException",
    "CompanyNotFoundException",
    "JobNotFoundException",
    "UserNotFoundException",
    "DuplicateCompanyException",
    "DuplicateUsernameException",
]
