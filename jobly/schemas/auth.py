"""
Authentication schemas.
"""
from pydantic import ConfigDict, Field

from jobly.schemas.base import BaseSchema, RequestSchema


class LoginRequest(RequestSchema):
    """Token request body."""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)


class TokenResponse(BaseSchema):
    """Token issued after login or registration."""

    token: str


class Principal(BaseSchema):
    """
    The authenticated identity for one request.

    Built from the verified token claims (``username``, ``isAdmin``) and never
    persisted.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    is_admin: bool = False
