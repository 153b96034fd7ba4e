"""
Pydantic schemas for API validation and serialization.
"""
from jobly.schemas.base import (
    BaseSchema,
    RequestSchema,
    DeletedResponse,
    ErrorResponse,
)
from jobly.schemas.auth import (
    LoginRequest,
    TokenResponse,
    Principal,
)
from jobly.schemas.user import (
    RegisterRequest,
    UserCreate,
    UserUpdate,
    UserResponse,
    UserDetail,
    UserCreatedResponse,
    AppliedResponse,
)
from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyFilter,
    CompanyResponse,
    CompanyJob,
    CompanyDetail,
)
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobFilter,
    JobResponse,
    JobDetail,
)

__all__ = [
    # Base
    "BaseSchema",
    "RequestSchema",
    "DeletedResponse",
    "ErrorResponse",
    # Auth
    "LoginRequest",
    "TokenResponse",
    "Principal",
    # User
    "RegisterRequest",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserDetail",
    "UserCreatedResponse",
    "AppliedResponse",
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyFilter",
    "CompanyResponse",
    "CompanyJob",
    "CompanyDetail",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobFilter",
    "JobResponse",
    "JobDetail",
]
