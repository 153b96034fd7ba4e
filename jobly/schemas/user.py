"""
User schemas.
"""
from typing import List, Optional

from pydantic import EmailStr, Field, model_validator

from jobly.schemas.base import BaseSchema, RequestSchema


class RegisterRequest(RequestSchema):
    """Self-registration body; always creates a regular user."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserCreate(RegisterRequest):
    """Admin-only user creation; may grant admin."""

    is_admin: bool = False


class UserUpdate(RequestSchema):
    """Partial user update."""

    password: Optional[str] = Field(None, min_length=5, max_length=20)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None

    @model_validator(mode="after")
    def _no_nulls(self) -> "UserUpdate":
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self


class UserResponse(BaseSchema):
    """User without the password hash."""

    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetail(UserResponse):
    """User with the ids of jobs applied to."""

    jobs: List[int] = []


class UserCreatedResponse(BaseSchema):
    user: UserResponse
    token: str


class AppliedResponse(BaseSchema):
    applied: int
