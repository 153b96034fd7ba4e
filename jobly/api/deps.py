"""
API dependencies for dependency injection.

Authorization is a chain of dependencies: ``authenticate`` decodes the bearer
token (never rejecting), and the ``require_*`` dependencies placed on
individual routes decide whether the caller may proceed.
"""
from typing import Optional, Type, TypeVar

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError

from jobly.core.config import Settings
from jobly.core.exceptions import (
    AdminRequiredException,
    UnauthorizedException,
    ValidationException,
)
from jobly.core.logging import bind_principal, get_logger
from jobly.core.security import decode_token
from jobly.schemas.auth import Principal
from jobly.schemas.base import RequestSchema
from jobly.schemas.company import CompanyFilter
from jobly.schemas.job import JobFilter

logger = get_logger(__name__)

FilterType = TypeVar("FilterType", bound=RequestSchema)

# Security scheme
security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


async def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Optional[Principal]:
    """
    Decode the bearer token, if any, into a Principal.

    A missing, malformed or badly signed token is not an error here: the
    request simply proceeds anonymously. The principal is also stored on
    ``request.state.principal`` and bound into the log context.
    """
    request.state.principal = None
    bind_principal(None)
    if not credentials:
        return None

    payload = decode_token(credentials.credentials, settings)
    if payload is None:
        logger.debug("token_rejected", path=request.url.path)
        return None

    try:
        principal = Principal.model_validate(payload)
    except ValidationError:
        logger.debug("token_claims_invalid", path=request.url.path)
        return None

    request.state.principal = principal
    bind_principal(principal.username, principal.is_admin)
    return principal


def require_user(
    principal: Optional[Principal] = Depends(authenticate),
) -> Principal:
    """
    Require a logged-in caller.

    Raises:
        UnauthorizedException: If no valid token was presented
    """
    if principal is None:
        raise UnauthorizedException("Authentication required")
    return principal


def require_admin(
    principal: Optional[Principal] = Depends(authenticate),
) -> Principal:
    """
    Require an admin caller.

    Raises:
        AdminRequiredException: If anonymous or not an admin
    """
    if principal is None or not principal.is_admin:
        raise AdminRequiredException()
    return principal


def require_admin_or_self(
    username: str,
    principal: Optional[Principal] = Depends(authenticate),
) -> Principal:
    """
    Require an admin, or the user named by the ``username`` path parameter.

    Raises:
        UnauthorizedException: Otherwise
    """
    if principal is None or not (principal.is_admin or principal.username == username):
        raise UnauthorizedException()
    return principal


def _parse_filters(request: Request, model: Type[FilterType]) -> FilterType:
    try:
        return model.model_validate(dict(request.query_params))
    except ValidationError as exc:
        raise ValidationException(
            [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
        )


def company_filters(request: Request) -> CompanyFilter:
    """Query string of ``GET /companies`` as a typed filter."""
    return _parse_filters(request, CompanyFilter)


def job_filters(request: Request) -> JobFilter:
    """
    Query string of ``GET /jobs`` as a typed filter.

    Query values arrive as strings; ``minSalary`` and ``hasEquity`` are
    coerced to int and bool by validation.
    """
    return _parse_filters(request, JobFilter)
